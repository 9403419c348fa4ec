"""
Task queries used by the task routes, fixtures and CLI.
"""
from tasker import db
from tasker.tasks.models import Task

DEFAULT_SORT = "id"
DEFAULT_DIRECTION = "ASC"

# Allowlist: sort name accepted from the request -> mapped column
SORT_COLUMNS = {
    "id": Task.id,
    "title": Task.title,
    "description": Task.description,
    "isCompleted": Task.is_completed,
    "createdAt": Task.created_at,
}
DIRECTIONS = ("ASC", "DESC")


def normalize_sort(sort_by, direction):
    """
    Return the effective (sort_by, direction) pair.
    Values outside the allowlists fall back to id / ASC instead of raising.
    """
    if sort_by not in SORT_COLUMNS:
        sort_by = DEFAULT_SORT
    direction = str(direction or "").upper()
    if direction not in DIRECTIONS:
        direction = DEFAULT_DIRECTION
    return sort_by, direction


def find_all_sorted(sort_by=DEFAULT_SORT, direction=DEFAULT_DIRECTION):
    """All tasks ordered by an allowlisted column and direction."""
    sort_by, direction = normalize_sort(sort_by, direction)
    column = SORT_COLUMNS[sort_by]
    order = column.desc() if direction == "DESC" else column.asc()
    return Task.query.order_by(order).all()


def find_by_owner(user):
    return user.tasks_query().all()


def delete_all_tasks():
    """Delete every task and return how many were removed. Caller commits."""
    tasks = Task.query.all()
    for task in tasks:
        db.session.delete(task)
    return len(tasks)
