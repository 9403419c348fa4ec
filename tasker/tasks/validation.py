"""
Field-level validation for task input.

validate_task() returns a list of FieldError; an empty list means the
input is valid. TaskForm merges these into its WTForms field errors.
"""
from collections import namedtuple
from datetime import datetime, timedelta

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000
# How far past "now" a created_at value may be
CREATED_AT_MAX_SKEW = timedelta(minutes=1)

FieldError = namedtuple("FieldError", ["field", "message"])


def validate_task(title, description, created_at, created_by_id, now=None):
    """
    Check task input and collect every field error.

    Args:
        title (str): Task title, required, 3-255 characters after stripping.
        description (str | None): Optional, at most 1000 characters.
        created_at (datetime | None): Required, at most one minute in the future.
        created_by_id (int | None): Owning user id, required.
        now (datetime, optional): Reference time (naive UTC). Defaults to utcnow.

    Returns:
        list[FieldError]: One entry per failed rule, at most one per field.
    """
    errors = []
    now = now or datetime.utcnow()

    stripped = (title or "").strip()
    if not stripped:
        errors.append(FieldError("title", "Task title cannot be empty"))
    elif len(stripped) < TITLE_MIN_LENGTH:
        errors.append(FieldError(
            "title", f"Task title must be at least {TITLE_MIN_LENGTH} characters long"))
    elif len(stripped) > TITLE_MAX_LENGTH:
        errors.append(FieldError(
            "title", f"Task title cannot be longer than {TITLE_MAX_LENGTH} characters"))

    if description and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(FieldError(
            "description",
            f"Task description cannot be longer than {DESCRIPTION_MAX_LENGTH} characters"))

    if created_at is None:
        errors.append(FieldError("created_at", "Created date cannot be empty"))
    elif created_at > now + CREATED_AT_MAX_SKEW:
        errors.append(FieldError(
            "created_at", "Created date cannot be more than 1 minute in the future"))

    if not created_by_id:
        errors.append(FieldError("created_by_id", "Task owner cannot be empty"))

    return errors
