from .authentication_service import AuthenticationService
from .credentials_service import CredentialService
from .networks_service import NetworkService
from .users_service import UserService

__all__ = ['AuthenticationService', 'CredentialService', 'NetworkService', 'UserService']
