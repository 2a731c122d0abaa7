from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import User  # noqa: E402
from .session import Session  # noqa: E402
from .credential import Credential  # noqa: E402
from .network import Network  # noqa: E402

__all__ = ['db', 'User', 'Session', 'Credential', 'Network']
