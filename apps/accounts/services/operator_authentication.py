"""Operator authentication service."""

import hashlib
import hmac

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


def hash_password(password: str) -> str:
    """Return the SHA-256 hex digest of ``password``."""
    return hashlib.sha256(password.encode('utf-8')).hexdigest()


def check_credentials(username: str, password: str) -> bool:
    """
    Compare a username/password pair with the configured operator credential.

    The candidate password is hashed and compared against
    ``settings.OPERATOR_PASSWORD_SHA256`` in constant time.
    """
    if username != settings.OPERATOR_USERNAME:
        return False
    return hmac.compare_digest(
        hash_password(password or ''),
        settings.OPERATOR_PASSWORD_SHA256.lower(),
    )


@transaction.atomic
def authenticate_operator(*, username: str, password: str) -> User:
    """
    Authenticate the operator and return its Django user.

    The user row exists only so that JWT tokens can be issued; it is created
    on first login with an unusable password (the configured digest stays
    the single source of truth).

    Args:
        username: Submitted username
        password: Submitted password

    Returns:
        The operator User instance

    Raises:
        InvalidCredentialsError: If the pair does not match
        InactiveAccountError: If the operator user was deactivated
    """
    if not check_credentials(username, password):
        raise InvalidCredentialsError("Invalid username or password")

    user, created = User.objects.select_for_update().get_or_create(
        username=settings.OPERATOR_USERNAME,
    )
    if created:
        user.set_unusable_password()

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save()

    return user
