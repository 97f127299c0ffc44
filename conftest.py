"""Fixtures shared by every app's tests: API clients and the operator user."""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

User = get_user_model()

OPERATOR_PASSWORD = 'siva@2000'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def operator_credentials(settings):
    """Return the configured operator username and its plain password."""
    settings.OPERATOR_USERNAME = 'siva@2000'
    settings.OPERATOR_PASSWORD_SHA256 = (
        'cf7bf91ccc047b2474ec6216f4f15cc5d2709b19fcafb6bd2a2a90cb90e3eea8'
    )
    return {'username': 'siva@2000', 'password': OPERATOR_PASSWORD}


@pytest.fixture
def operator_user(db, operator_credentials):
    """Create and return the operator's Django user."""
    user = User.objects.create(username=operator_credentials['username'])
    user.set_unusable_password()
    user.save()
    return user


@pytest.fixture
def authenticated_client(api_client, operator_user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(operator_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
