"""Flask CLI commands for seeding and clearing task data"""

import click
import logging

from tasker import db
from tasker.fixtures import load_fixtures
from tasker.tasks.repository import delete_all_tasks

logger = logging.getLogger(__name__)


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("load-fixtures")
    @click.option("--append", is_flag=True, help="Keep existing rows instead of purging first.")
    def load_fixtures_command(append):
        """
        Load the seed users and tasks.
        Purges both tables first unless --append is given.
        """
        click.echo("Loading fixtures...")
        result = load_fixtures(purge=not append)
        click.echo(f"  - Users created: {result['users']}")
        click.echo(f"  - Tasks created: {result['tasks']}")

    @app.cli.command("delete-tasks")
    def delete_tasks_command():
        """Delete every task, keeping users."""
        deleted = delete_all_tasks()
        db.session.commit()
        logger.info(f"Deleted {deleted} task(s) from the command line")
        click.echo(f"Deleted {deleted} task(s).")
