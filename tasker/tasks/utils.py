"""
Per-action CSRF tokens for the delete buttons.

Every action ("delete_all_tasks", "delete<id>") signs the session's single
CSRF secret with its own salt, so a token issued for one action is rejected
by every other while the session keeps a fixed size.
"""
import hmac
import logging

from flask import current_app, session
from flask_wtf.csrf import generate_csrf
from itsdangerous import BadData, SignatureExpired, URLSafeTimedSerializer

logger = logging.getLogger(__name__)

DELETE_ALL_ACTION = 'delete_all_tasks'


def delete_action(task_id):
    return f'delete{task_id}'


def _serializer(action):
    secret_key = current_app.config.get('WTF_CSRF_SECRET_KEY') or current_app.secret_key
    return URLSafeTimedSerializer(secret_key, salt=f'tasker-{action}')


def _session_field():
    return current_app.config.get('WTF_CSRF_FIELD_NAME', 'csrf_token')


def action_token(action):
    """Signed token for one action, issued against the current session."""
    # Makes sure the session holds its CSRF secret
    generate_csrf()
    return _serializer(action).dumps(session[_session_field()])


def is_action_token_valid(action, token):
    """
    True if token was issued for this action in this session and has not expired.
    Invalid tokens are logged and reported as False, never raised.
    """
    if not token:
        reason = 'token is missing'
    elif _session_field() not in session:
        reason = 'session secret is missing'
    else:
        try:
            signed = _serializer(action).loads(
                token, max_age=current_app.config.get('WTF_CSRF_TIME_LIMIT', 3600))
        except SignatureExpired:
            reason = 'token has expired'
        except BadData:
            reason = 'token is invalid'
        else:
            if hmac.compare_digest(str(signed), session[_session_field()]):
                return True
            reason = 'token does not match this session'

    logger.warning(f"Rejected CSRF token for action '{action}': {reason}")
    return False
