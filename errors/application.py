from http import HTTPStatus
from typing import Optional


class ApplicationError(Exception):
    """Base for errors that map onto an HTTP response.

    Each subclass fixes the public ``name`` and status code; the message may be
    overridden per raise.
    """

    name = 'ApplicationError'
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = 'Unexpected application error'

    def __init__(self, message: Optional[str] = None, details: Optional[list] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        body = {'name': self.name, 'message': self.message}
        if self.details:
            body['details'] = self.details
        return body


class UnauthorizedError(ApplicationError):
    name = 'UnauthorizedError'
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = 'You must be signed in to continue'


class InvalidDataError(ApplicationError):
    name = 'InvalidDataError'
    status_code = HTTPStatus.BAD_REQUEST
    default_message = 'Invalid data'


class NotFoundError(ApplicationError):
    name = 'NotFoundError'
    status_code = HTTPStatus.NOT_FOUND
    default_message = 'No result for this search!'


class CredentialNameError(ApplicationError):
    # Raised for duplicate titles on both credentials and networks
    name = 'CredentialNameError'
    status_code = HTTPStatus.CONFLICT
    default_message = 'A Credential with this name already exists'


class DuplicatedEmailError(ApplicationError):
    name = 'DuplicatedEmailError'
    status_code = HTTPStatus.CONFLICT
    default_message = 'There is already an user with given email'


class InvalidCredentialsError(ApplicationError):
    name = 'InvalidCredentialsError'
    status_code = HTTPStatus.UNAUTHORIZED
    default_message = 'email or password are incorrect'
