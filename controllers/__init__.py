from .authentication_controller import auth_bp
from .credential_controller import credentials_bp
from .health_controller import health_bp
from .network_controller import networks_bp
from .user_controller import users_bp

__all__ = ['auth_bp', 'credentials_bp', 'health_bp', 'networks_bp', 'users_bp']
