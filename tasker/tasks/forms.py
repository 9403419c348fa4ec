from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, BooleanField, SelectField
from wtforms.fields import DateTimeLocalField
from wtforms.validators import ValidationError

from tasker import db
from tasker.models import User
from tasker.tasks.validation import (
    validate_task,
    TITLE_MIN_LENGTH,
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
)

# Seconds first so editing a task keeps its stored created_at; browsers may omit them
DATETIME_LOCAL_FORMATS = ['%Y-%m-%dT%H:%M:%S', '%Y-%m-%dT%H:%M']


def _optional_user_id(value):
    if value in (None, ''):
        return None
    return int(value)


class TaskForm(FlaskForm):
    title = StringField('Title',
                        render_kw={"placeholder": "Enter task title...",
                                   "minlength": TITLE_MIN_LENGTH,
                                   "maxlength": TITLE_MAX_LENGTH})
    description = TextAreaField('Description',
                                render_kw={"placeholder": "Enter task description...",
                                           "rows": 4,
                                           "maxlength": DESCRIPTION_MAX_LENGTH})
    is_completed = BooleanField('Completed')
    created_at = DateTimeLocalField('Created at', format=DATETIME_LOCAL_FORMATS)
    created_by_id = SelectField('Created by', coerce=_optional_user_id, choices=[],
                                validate_choice=False)

    def set_owner_choices(self):
        """Owner select lists every user, labelled by email."""
        self.created_by_id.choices = [('', 'Choose a user')] + [
            (user.id, user.email) for user in User.query.order_by(User.id).all()
        ]

    def validate_created_by_id(self, field):
        # An empty owner is reported by validate_task
        if field.data is not None and db.session.get(User, field.data) is None:
            raise ValidationError('Not a valid choice.')

    def validate(self, extra_validators=None):
        valid = super().validate(extra_validators=extra_validators)
        for error in validate_task(self.title.data,
                                   self.description.data,
                                   self.created_at.data,
                                   self.created_by_id.data):
            field = getattr(self, error.field)
            # Keep the first problem per field (e.g. an unparseable date)
            if not field.errors:
                field.errors.append(error.message)
            valid = False
        return valid

    def populate_task(self, task):
        task.title = self.title.data.strip()
        task.description = self.description.data or None
        task.is_completed = bool(self.is_completed.data)
        task.created_at = self.created_at.data
        task.created_by_id = self.created_by_id.data
