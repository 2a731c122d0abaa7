from models import Network

from .base import OwnedRecordRepository


class NetworkRepository(OwnedRecordRepository):
    model = Network
