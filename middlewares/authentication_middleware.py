from flask import current_app, g, request

from errors import UnauthorizedError
from models import db
from repositories import SessionRepository, UserRepository
from services import AuthenticationService

PROTECTED_PREFIXES = ('/credentials', '/networks')


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme != 'Bearer' or not token:
        raise UnauthorizedError()
    return token.strip()


def _is_protected(path: str) -> bool:
    return any(path == prefix or path.startswith(prefix + '/') for prefix in PROTECTED_PREFIXES)


def authenticate_token():
    # Sets g.user_id on success
    service = AuthenticationService(
        UserRepository(db.session),
        SessionRepository(db.session),
        current_app.config['JWT_SECRET'],
    )
    g.user_id = service.resolve_user_id(_bearer_token())


def require_token(app):
    """Guard every path under the protected prefixes.

    Runs as an app-level hook so it fires before routing errors, which
    means unknown ids and stray slashes still answer 401 without a token.
    """

    @app.before_request
    def _authenticate_protected_paths():
        if _is_protected(request.path):
            authenticate_token()
