from models import Credential

from .base import OwnedRecordRepository


class CredentialRepository(OwnedRecordRepository):
    model = Credential
