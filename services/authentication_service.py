import uuid
from datetime import datetime, timezone
from typing import Optional

from jose import JWTError, jwt
from loguru import logger

from errors import InvalidCredentialsError, UnauthorizedError

JWT_ALGORITHM = 'HS256'


class AuthenticationService:
    """Signs users in and resolves bearer tokens back to a user id.

    A token is only honoured while a session row holds it, so a correctly
    signed token without a session is still rejected.
    """

    def __init__(self, users, sessions, secret: str):
        self.users = users
        self.sessions = sessions
        self.secret = secret

    def create_token(self, user_id: int) -> str:
        # jti keeps tokens distinct when one user signs in twice in the same second
        claims = {
            'userId': user_id,
            'iat': datetime.now(timezone.utc),
            'jti': uuid.uuid4().hex,
        }
        return jwt.encode(claims, self.secret, algorithm=JWT_ALGORITHM)

    def sign_in(self, email: str, password: str) -> dict:
        user = self.users.find_by_email(email)
        if not user or not user.check_password(password):
            raise InvalidCredentialsError()

        token = self.create_token(user.id)
        self.sessions.create(user.id, token)
        logger.info('User {} signed in', user.id)
        return {'user': user.to_dict(), 'token': token}

    def resolve_user_id(self, token: Optional[str]) -> int:
        if not token:
            raise UnauthorizedError()
        try:
            payload = jwt.decode(token, self.secret, algorithms=[JWT_ALGORITHM])
        except JWTError:
            raise UnauthorizedError()

        user_id = payload.get('userId')
        session = self.sessions.find_by_token(token)
        if user_id is None or not session or session.user_id != user_id:
            raise UnauthorizedError()
        return user_id
