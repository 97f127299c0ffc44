"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .operator_authentication import (
    authenticate_operator,
    check_credentials,
    hash_password,
)
from .operator_session import OperatorSession

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    # Services
    'authenticate_operator',
    'check_credentials',
    'hash_password',
    'OperatorSession',
]
