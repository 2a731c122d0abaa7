from .credential_schemas import NewCredentialSchema
from .network_schemas import NewNetworkSchema
from .user_schemas import SignInSchema, SignUpSchema

__all__ = ['NewCredentialSchema', 'NewNetworkSchema', 'SignInSchema', 'SignUpSchema']
