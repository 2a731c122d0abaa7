from loguru import logger
from sqlalchemy.exc import IntegrityError

from errors import CredentialNameError, NotFoundError


class OwnedRecordService:
    """Shared flow for user-owned records with an encrypted ``password``.

    Records are returned as dicts so the decrypted password never lands on a
    session-tracked instance.
    """

    kind = 'record'

    def __init__(self, repository, cipher):
        self.repository = repository
        self.cipher = cipher

    def _reveal(self, record) -> dict:
        data = record.to_dict()
        data['password'] = self.cipher.decrypt(record.password)
        return data

    def _find_owned(self, user_id: int, record_id: int):
        # Another user's record is reported exactly like a missing one
        record = self.repository.find_by_id(record_id)
        if not record or record.user_id != user_id:
            logger.debug('{} {} not found for user {}', self.kind, record_id, user_id)
            raise NotFoundError()
        return record

    def _check_title_is_unique(self, user_id: int, title: str) -> None:
        if self.repository.find_by_title(user_id, title, select=['id']):
            raise CredentialNameError()

    def _insert(self, data: dict):
        self._check_title_is_unique(data['user_id'], data['title'])
        data['password'] = self.cipher.encrypt(data['password'])
        try:
            record = self.repository.create(data)
        except IntegrityError:
            # Lost a race against a concurrent insert of the same title
            self.repository.session.rollback()
            raise CredentialNameError()
        logger.info('Created {} {} for user {}', self.kind, record.id, record.user_id)
        return record

    def list(self, user_id: int) -> list:
        records = self.repository.list_by_user(user_id)
        if not records:
            raise NotFoundError()
        return [self._reveal(record) for record in records]

    def locate(self, user_id: int, record_id: int) -> dict:
        return self._reveal(self._find_owned(user_id, record_id))

    def delete(self, user_id: int, record_id: int) -> None:
        self._find_owned(user_id, record_id)
        self.repository.delete(record_id)
        logger.info('Deleted {} {} for user {}', self.kind, record_id, user_id)
