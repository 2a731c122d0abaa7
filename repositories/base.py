from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm.exc import NoResultFound

# Widest surrogate key any supported backend stores (signed BIGINT)
MAX_ID = 2 ** 63 - 1


def id_in_range(record_id: int) -> bool:
    return 0 < record_id <= MAX_ID


class OwnedRecordRepository:
    """Data access for a table of user-owned, titled records.

    ``select`` arguments take column names and return a partial row
    instead of the mapped entity.
    """

    model = None

    def __init__(self, session):
        self.session = session

    def _columns(self, fields: Sequence[str]):
        return [getattr(self.model, name) for name in fields]

    def _first(self, criteria, fields: Optional[Sequence[str]]):
        if fields:
            stmt = select(*self._columns(fields)).where(*criteria)
            return self.session.execute(stmt).first()
        return self.session.execute(select(self.model).where(*criteria)).scalars().first()

    def create(self, data: dict):
        record = self.model(**data)
        self.session.add(record)
        self.session.commit()
        return record

    def list_by_user(self, user_id: int):
        stmt = select(self.model).where(self.model.user_id == user_id).order_by(self.model.id)
        return self.session.execute(stmt).scalars().all()

    def find_by_id(self, record_id: int, select: Optional[Sequence[str]] = None):
        if not id_in_range(record_id):
            return None
        return self._first([self.model.id == record_id], select)

    def find_by_title(self, user_id: int, title: str, select: Optional[Sequence[str]] = None):
        return self._first([self.model.user_id == user_id, self.model.title == title], select)

    def delete(self, record_id: int) -> None:
        if not id_in_range(record_id):
            raise NoResultFound(f'No {self.model.__tablename__} row with id {record_id}')
        result = self.session.execute(delete(self.model).where(self.model.id == record_id))
        if result.rowcount == 0:
            self.session.rollback()
            raise NoResultFound(f'No {self.model.__tablename__} row with id {record_id}')
        self.session.commit()
