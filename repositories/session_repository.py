from sqlalchemy import select

from models import Session


class SessionRepository:
    def __init__(self, session):
        self.session = session

    def create(self, user_id: int, token: str) -> Session:
        record = Session(user_id=user_id, token=token)
        self.session.add(record)
        self.session.commit()
        return record

    def find_by_token(self, token: str):
        return self.session.execute(select(Session).where(Session.token == token)).scalars().first()
