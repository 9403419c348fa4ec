"""
Task CRUD pages: sorted list, create, show, edit, delete and delete-all.
"""
import logging
from datetime import datetime

from flask import Blueprint, render_template, redirect, url_for, flash, request, abort

from tasker import db, csrf
from tasker.models import User
from tasker.tasks.forms import TaskForm
from tasker.tasks.models import Task
from tasker.tasks.repository import find_all_sorted, normalize_sort, delete_all_tasks
from tasker.tasks.utils import (
    DELETE_ALL_ACTION,
    action_token,
    delete_action,
    is_action_token_valid,
)

logger = logging.getLogger(__name__)

# New tasks are assigned to this seeded user unless another owner is picked
DEFAULT_OWNER_EMAIL = 'john.doe@example.com'

tasks_bp = Blueprint('tasks', __name__,
                     template_folder='templates')


# --- Helper Functions ---

def get_task_or_404(task_id):
    task = db.session.get(Task, task_id)
    if task is None:
        abort(404)
    return task


def _redirect_to_index():
    return redirect(url_for('tasks.index'), code=303)


@tasks_bp.app_template_global('csrf_action_token')
def csrf_action_token(action):
    """Jinja global for rendering a per-action token into a delete form."""
    return action_token(action)


@tasks_bp.app_context_processor
def inject_actions():
    return {'DELETE_ALL_ACTION': DELETE_ALL_ACTION, 'delete_action': delete_action}


# --- Routes ---

@tasks_bp.route('/')
def index():
    """Task list, ordered by the 'sort' and 'direction' query params."""
    sort_by = request.args.get('sort', 'id')
    direction = request.args.get('direction', 'ASC')
    current_sort, current_direction = normalize_sort(sort_by, direction)
    tasks = find_all_sorted(sort_by, direction)
    return render_template('tasks/index.html',
                           tasks=tasks,
                           current_sort=current_sort,
                           current_direction=current_direction)


@tasks_bp.route('/new', methods=['GET', 'POST'])
def new():
    """Show and handle the task creation form."""
    form = TaskForm()
    form.set_owner_choices()

    if not form.is_submitted():
        form.created_at.data = datetime.utcnow().replace(second=0, microsecond=0)
        form.is_completed.data = False
        default_owner = User.query.filter_by(email=DEFAULT_OWNER_EMAIL).first()
        if default_owner:
            form.created_by_id.data = default_owner.id

    if form.validate_on_submit():
        task = Task()
        form.populate_task(task)
        db.session.add(task)
        db.session.commit()
        logger.info(f"Created task {task.id}: '{task.title}'")

        flash('Task created successfully!', 'success')
        return _redirect_to_index()

    status = 422 if form.is_submitted() else 200
    return render_template('tasks/new.html', form=form), status


@tasks_bp.route('/delete-all', methods=['POST'])
@csrf.exempt
def delete_all():
    """Delete every task. A missing or wrong token leaves the data untouched."""
    if is_action_token_valid(DELETE_ALL_ACTION, request.form.get('_token')):
        deleted = delete_all_tasks()
        db.session.commit()
        logger.info(f"Deleted all tasks ({deleted})")
        flash('All tasks have been deleted successfully.', 'success')

    return _redirect_to_index()


@tasks_bp.route('/<int:task_id>')
def show(task_id):
    task = get_task_or_404(task_id)
    return render_template('tasks/show.html', task=task)


@tasks_bp.route('/<int:task_id>/edit', methods=['GET', 'POST'])
def edit(task_id):
    """Show and handle the edit form for one task."""
    task = get_task_or_404(task_id)
    form = TaskForm(obj=task)
    form.set_owner_choices()

    if form.validate_on_submit():
        form.populate_task(task)
        db.session.commit()
        logger.info(f"Updated task {task.id}: '{task.title}'")

        flash('Task updated successfully!', 'success')
        return _redirect_to_index()

    status = 422 if form.is_submitted() else 200
    return render_template('tasks/edit.html', task=task, form=form), status


@tasks_bp.route('/<int:task_id>', methods=['POST'])
@csrf.exempt
def delete(task_id):
    """Delete one task. A missing or wrong token leaves the data untouched."""
    task = get_task_or_404(task_id)

    if is_action_token_valid(delete_action(task.id), request.form.get('_token')):
        db.session.delete(task)
        db.session.commit()
        logger.info(f"Deleted task {task_id}")
        flash('Task deleted successfully.', 'success')

    return _redirect_to_index()
