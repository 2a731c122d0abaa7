from loguru import logger
from sqlalchemy.exc import IntegrityError

from errors import DuplicatedEmailError


class UserService:
    def __init__(self, users):
        self.users = users

    def create_user(self, email: str, password: str):
        if self.users.find_by_email(email):
            raise DuplicatedEmailError()
        try:
            user = self.users.create(email, password)
        except IntegrityError:
            self.users.session.rollback()
            raise DuplicatedEmailError()
        logger.info('Created user {}', user.id)
        return user
