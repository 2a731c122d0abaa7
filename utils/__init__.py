from .crypto import Cipher, CipherError, derive_key, load_key
from .logging import setup_logging

__all__ = ['Cipher', 'CipherError', 'derive_key', 'load_key', 'setup_logging']
