"""
Seed data: two users and ten tasks, inserted in a fixed order.
"""
import logging
from datetime import datetime

from tasker import db
from tasker.models import User
from tasker.tasks.models import Task

logger = logging.getLogger(__name__)

USERS = [
    {'name': 'John Doe', 'email': 'john.doe@example.com'},
    {'name': 'Jane Smith', 'email': 'jane.smith@example.com'},
]

# created_by refers to the email of one of USERS
TASKS = [
    {
        'title': 'Setup development environment',
        'description': 'Install required tools and configure the development environment for the new project.',
        'is_completed': True,
        'created_by': 'john.doe@example.com',
    },
    {
        'title': 'Design database schema',
        'description': 'Create entity relationship diagrams and define the database structure.',
        'is_completed': True,
        'created_by': 'john.doe@example.com',
    },
    {
        'title': 'Implement user authentication',
        'description': 'Create login and registration functionality with proper security measures.',
        'is_completed': False,
        'created_by': 'jane.smith@example.com',
    },
    {
        'title': 'Create task management features',
        'description': 'Implement CRUD operations for task management including create, read, update, and delete.',
        'is_completed': False,
        'created_by': 'john.doe@example.com',
    },
    {
        'title': 'Write unit tests',
        'description': 'Create comprehensive unit tests for all application components.',
        'is_completed': False,
        'created_by': 'jane.smith@example.com',
    },
    {
        'title': 'Setup CI/CD pipeline',
        'description': 'Configure continuous integration and deployment pipeline for automated testing and deployment.',
        'is_completed': False,
        'created_by': 'john.doe@example.com',
    },
    {
        'title': 'Create API documentation',
        'description': 'Document all API endpoints with proper examples and usage guidelines.',
        'is_completed': False,
        'created_by': 'jane.smith@example.com',
    },
    {
        'title': 'Implement email notifications',
        'description': 'Add email notification system for task assignments and updates.',
        'is_completed': False,
        'created_by': 'john.doe@example.com',
    },
    {
        'title': 'Add search functionality',
        'description': 'Implement search and filtering capabilities for tasks and users.',
        'is_completed': False,
        'created_by': 'jane.smith@example.com',
    },
    {
        'title': 'Performance optimization',
        'description': 'Optimize database queries and improve application performance.',
        'is_completed': False,
        'created_by': 'john.doe@example.com',
    },
]


def load_fixtures(purge=True):
    """
    Insert the seed users and tasks and commit.

    Args:
        purge (bool): Delete all existing tasks and users first. With purge=False,
                      users whose email already exists are reused.

    Returns:
        dict: {"users": int, "tasks": int} counts of rows inserted.
    """
    if purge:
        Task.query.delete()
        User.query.delete()
        db.session.flush()

    users_by_email = {}
    users_created = 0
    for user_data in USERS:
        user = None if purge else User.query.filter_by(email=user_data['email']).first()
        if user is None:
            user = User(name=user_data['name'], email=user_data['email'])
            db.session.add(user)
            users_created += 1
        users_by_email[user.email] = user
    # Assign ids so tasks can reference their owners
    db.session.flush()

    now = datetime.utcnow().replace(microsecond=0)
    for task_data in TASKS:
        task = Task(
            title=task_data['title'],
            description=task_data['description'],
            is_completed=task_data['is_completed'],
            created_by_id=users_by_email[task_data['created_by']].id,
            created_at=now,
        )
        db.session.add(task)
        # One flush per task keeps ids in list order
        db.session.flush()

    db.session.commit()
    logger.info(f"Loaded fixtures: {users_created} users, {len(TASKS)} tasks")
    return {'users': users_created, 'tasks': len(TASKS)}
