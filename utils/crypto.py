import base64
import os

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

KEY_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'secret.key'))

# The key must stay stable for the lifetime of the stored ciphertexts,
# so the passphrase salt is fixed per application.
_KDF_SALT = b'drivenpass.cipher.v1'
_KDF_ITERATIONS = 390_000


class CipherError(Exception):
    pass


def load_key(path=None):
    # Read the Fernet key from disk, creating it on first use
    path = path or KEY_PATH
    if not os.path.exists(path):
        key = Fernet.generate_key()
        with open(path, 'wb') as f:
            f.write(key)
        return key
    with open(path, 'rb') as f:
        return f.read().strip()


def derive_key(secret: str) -> bytes:
    # Turn an arbitrary passphrase into a urlsafe base64 Fernet key
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=_KDF_SALT,
        iterations=_KDF_ITERATIONS,
    )
    return base64.urlsafe_b64encode(kdf.derive(secret.encode('utf-8')))


class Cipher:
    """Reversible string encryption with a single process-wide key."""

    def __init__(self, key: bytes):
        try:
            self._fernet = Fernet(key)
        except ValueError as exc:
            raise CipherError('Invalid cipher key') from exc

    @classmethod
    def from_config(cls, config):
        secret = config.get('CRYPTR_SECRET')
        if secret:
            return cls(derive_key(secret))
        return cls(load_key(config.get('SECRET_KEY_PATH')))

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode('utf-8')).decode('utf-8')

    def decrypt(self, ciphertext: str) -> str:
        try:
            data = self._fernet.decrypt(ciphertext.encode('utf-8'))
        except InvalidToken as exc:
            raise CipherError('Unable to decrypt stored value') from exc
        return data.decode('utf-8')
