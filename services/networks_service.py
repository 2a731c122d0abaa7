from .base import OwnedRecordService


class NetworkService(OwnedRecordService):
    kind = 'network'

    def create(self, user_id: int, title: str, network: str, password: str):
        return self._insert({
            'user_id': user_id,
            'title': title,
            'network': network,
            'password': password,
        })
