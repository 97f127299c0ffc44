"""
Operator session context.

Wraps a mutable mapping (the Django session in views, a plain dict in
tests) holding the "authenticated" flag, the username and the sign-in time.
Views receive an explicit :class:`OperatorSession` rather than reading the
session keys themselves.
"""

from django.utils import timezone
from django.utils.dateparse import parse_datetime


class OperatorSession:
    """
    Session context for the single operator.

    Args:
        store: Mutable mapping persisted between requests.
        clock: Callable returning an aware datetime (``timezone.now``).

    Example:
        >>> session = OperatorSession({})
        >>> session.sign_in('siva@2000')
        >>> session.is_authenticated, session.username
        (True, 'siva@2000')
        >>> session.sign_out()
        >>> session.is_authenticated
        False
    """

    AUTHENTICATED_KEY = 'authenticated'
    USERNAME_KEY = 'username'
    SIGNED_IN_AT_KEY = 'signed_in_at'

    def __init__(self, store, clock=timezone.now):
        self.store = store
        self.clock = clock

    @classmethod
    def for_request(cls, request, clock=timezone.now):
        return cls(request.session, clock=clock)

    @property
    def is_authenticated(self):
        return self.store.get(self.AUTHENTICATED_KEY) is True

    @property
    def username(self):
        if not self.is_authenticated:
            return None
        return self.store.get(self.USERNAME_KEY)

    @property
    def signed_in_at(self):
        value = self.store.get(self.SIGNED_IN_AT_KEY)
        return parse_datetime(value) if value else None

    def sign_in(self, username):
        self.store[self.AUTHENTICATED_KEY] = True
        self.store[self.USERNAME_KEY] = username
        # Stored as ISO text so JSON session serializers accept it
        self.store[self.SIGNED_IN_AT_KEY] = self.clock().isoformat()

    def sign_out(self):
        for key in (self.AUTHENTICATED_KEY, self.USERNAME_KEY, self.SIGNED_IN_AT_KEY):
            self.store.pop(key, None)

    def as_dict(self):
        return {
            'authenticated': self.is_authenticated,
            'username': self.username,
            'signed_in_at': self.signed_in_at,
        }
