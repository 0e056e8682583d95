"""
Pytest configuration and fixtures for the practice portal tests.
Provides user factories, API clients and Stripe mocks.
"""
import os
import sys

import django
import pytest

# Add the backend directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure Django settings before any Django imports
os.environ.setdefault('DJANGO_SETTINGS_MODULE',
                      'practice_portal.settings.test')
django.setup()

# Now safe to import Django and third-party modules
import factory
from factory.django import DjangoModelFactory
from faker import Faker
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.core.models import User, Role, UserStatus

# Initialize Faker for realistic test data
fake = Faker('en_GB')  # Use UK locale for UK-specific data


# ==================== Factory Classes ====================

class UserFactory(DjangoModelFactory):
    """Factory for creating practitioners."""

    class Meta:
        model = User
        skip_postgeneration_save = True

    email = factory.Sequence(lambda n: f'practitioner{n}@example.co.uk')
    first_name = factory.Faker('first_name', locale='en_GB')
    last_name = factory.Faker('last_name', locale='en_GB')
    phone = factory.LazyAttribute(
        lambda _: f"+44{fake.numerify('##########')}")
    role = Role.PRACTITIONER
    status = UserStatus.ACTIVE
    is_active = True

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        if not create:
            return
        self.set_password(extracted or 'testpass123')
        self.save()


class AdminFactory(UserFactory):
    """Factory for creating portal admins."""

    email = factory.Sequence(lambda n: f'admin{n}@example.co.uk')
    role = Role.ADMIN


# ==================== Pytest Fixtures ====================

@pytest.fixture
def practitioner(db):
    """Create a practitioner with a known password."""
    user = UserFactory()
    user.raw_password = 'testpass123'  # Store raw password for login tests
    return user


@pytest.fixture
def admin_user(db):
    """Create an admin with a known password."""
    user = AdminFactory()
    user.raw_password = 'testpass123'
    return user


@pytest.fixture
def api_client():
    return APIClient()


def authenticated_client(user):
    """APIClient carrying a bearer token for ``user``."""
    client = APIClient()
    token = RefreshToken.for_user(user).access_token
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    return client


@pytest.fixture
def practitioner_client(practitioner):
    return authenticated_client(practitioner)


@pytest.fixture
def admin_client_api(admin_user):
    return authenticated_client(admin_user)


# ==================== Mock Fixtures ====================

@pytest.fixture
def mock_stripe_retrieve(mocker):
    """Mock Stripe payment intent retrieval with a succeeded intent."""
    mock = mocker.patch('stripe.PaymentIntent.retrieve')
    mock.return_value = mocker.MagicMock(
        id='pi_test_123456789',
        client_secret='pi_test_123456789_secret_abc',
        amount=10500,
        currency='gbp',
        status='succeeded'
    )
    return mock


# ==================== Settings Override Fixtures ====================

@pytest.fixture
def stripe_unconfigured(settings):
    """No publishable key, so no payment form can be mounted."""
    settings.STRIPE_PUBLISHABLE_KEY = ''
    return settings
