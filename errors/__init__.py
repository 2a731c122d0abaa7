from .application import (
    ApplicationError,
    CredentialNameError,
    DuplicatedEmailError,
    InvalidCredentialsError,
    InvalidDataError,
    NotFoundError,
    UnauthorizedError,
)
from .handlers import register_error_handlers

__all__ = [
    'ApplicationError', 'CredentialNameError', 'DuplicatedEmailError',
    'InvalidCredentialsError', 'InvalidDataError', 'NotFoundError',
    'UnauthorizedError', 'register_error_handlers',
]
