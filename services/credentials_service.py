from .base import OwnedRecordService


class CredentialService(OwnedRecordService):
    kind = 'credential'

    def create(self, user_id: int, title: str, url: str, username: str, password: str):
        return self._insert({
            'user_id': user_id,
            'title': title,
            'url': url,
            'username': username,
            'password': password,
        })
