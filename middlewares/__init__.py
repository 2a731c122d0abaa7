from .authentication_middleware import authenticate_token, require_token
from .validation_middleware import validate_body

__all__ = ['authenticate_token', 'require_token', 'validate_body']
