from .credential_repository import CredentialRepository
from .network_repository import NetworkRepository
from .session_repository import SessionRepository
from .user_repository import UserRepository

__all__ = ['CredentialRepository', 'NetworkRepository', 'SessionRepository', 'UserRepository']
