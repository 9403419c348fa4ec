"""
Shared test app setup: in-memory SQLite, seeded with the fixtures.
"""
import re
import unittest

from tasker import create_app, db
from tasker.fixtures import load_fixtures


def create_test_app(**overrides):
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "SECRET_KEY": "test-secret-key",
        "WTF_CSRF_ENABLED": False,
    }
    config.update(overrides)
    return create_app(config)


def extract_action_token(html, action_url):
    """Pull the _token value out of the delete form posting to action_url."""
    match = re.search(
        r'action="' + re.escape(action_url) + r'"[^>]*>\s*'
        r'<input type="hidden" name="_token" value="([^"]+)"',
        html,
    )
    return match.group(1) if match else None


def extract_form_csrf_token(html):
    match = re.search(r'name="csrf_token" type="hidden" value="([^"]+)"', html)
    return match.group(1) if match else None


class SeededAppTestCase(unittest.TestCase):
    """App with fixtures loaded and a test client; one app context per test."""

    app_config = {}

    def setUp(self):
        self.app = create_test_app(**self.app_config)
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        load_fixtures()
        self.reset_session()
        self.client = self.app.test_client()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def reset_session(self):
        """Drop the test's session so the next query sees what requests committed."""
        db.session.remove()
