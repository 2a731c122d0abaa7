from sqlalchemy import select

from models import User


class UserRepository:
    def __init__(self, session):
        self.session = session

    def create(self, email: str, password: str) -> User:
        user = User(email=email)
        user.set_password(password)
        self.session.add(user)
        self.session.commit()
        return user

    def find_by_email(self, email: str):
        return self.session.execute(select(User).where(User.email == email)).scalars().first()

    def find_by_id(self, user_id: int):
        return self.session.get(User, user_id)
