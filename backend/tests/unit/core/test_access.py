"""
Unit tests for the access gate decision.
"""
import pytest

from apps.core.access import (
    ADMIN_PATH,
    LOGIN_PATH,
    AccessOutcome,
    AuthState,
    SessionUser,
    denial_message,
    evaluate_access,
)
from apps.core.models import Role


def state_for(role, email='someone@example.co.uk'):
    return AuthState(is_authenticated=True, loading=False,
                     user=SessionUser(role=role, email=email))


class TestLoadingState:
    """While loading nothing else is decided."""

    @pytest.mark.parametrize('kwargs', [
        {},
        {'required_role': Role.ADMIN},
        {'practitioner_only': True},
    ])
    def test_loading_wins(self, kwargs):
        decision = evaluate_access(AuthState.pending(), **kwargs)

        assert decision.outcome is AccessOutcome.LOADING
        assert decision.redirect_to is None
        assert not decision.allowed

    def test_loading_wins_even_when_authenticated(self):
        state = AuthState(is_authenticated=True, loading=True,
                          user=SessionUser(role=Role.ADMIN))

        decision = evaluate_access(state, practitioner_only=True)

        assert decision.outcome is AccessOutcome.LOADING


class TestUnauthenticated:

    def test_redirects_to_login(self):
        decision = evaluate_access(AuthState.anonymous())

        assert decision.outcome is AccessOutcome.REDIRECT
        assert decision.redirect_to == LOGIN_PATH == '/login'

    def test_redirects_to_login_before_role_checks(self):
        decision = evaluate_access(
            AuthState.anonymous(), required_role=Role.ADMIN, practitioner_only=True)

        assert decision.redirect_to == LOGIN_PATH


class TestPractitionerOnly:

    def test_admin_is_sent_to_admin_area(self):
        decision = evaluate_access(state_for(Role.ADMIN), practitioner_only=True)

        assert decision.outcome is AccessOutcome.REDIRECT
        assert decision.redirect_to == ADMIN_PATH == '/admin'

    def test_practitioner_is_allowed(self):
        decision = evaluate_access(state_for(Role.PRACTITIONER), practitioner_only=True)

        assert decision.allowed

    def test_admin_redirect_precedes_role_mismatch(self):
        decision = evaluate_access(
            state_for(Role.ADMIN),
            required_role=Role.PRACTITIONER,
            practitioner_only=True,
        )

        assert decision.outcome is AccessOutcome.REDIRECT
        assert decision.redirect_to == ADMIN_PATH


class TestRequiredRole:

    def test_matching_role_is_allowed(self):
        assert evaluate_access(state_for(Role.ADMIN), required_role=Role.ADMIN).allowed

    def test_mismatched_role_is_denied_with_message(self):
        decision = evaluate_access(state_for(Role.PRACTITIONER), required_role=Role.ADMIN)

        assert decision.outcome is AccessOutcome.DENIED
        assert decision.message == 'Access denied. admin role required.'
        assert decision.redirect_to is None

    def test_missing_user_counts_as_mismatch(self):
        state = AuthState(is_authenticated=True, loading=False, user=None)

        decision = evaluate_access(state, required_role=Role.ADMIN)

        assert decision.outcome is AccessOutcome.DENIED

    def test_denial_message_names_role(self):
        assert denial_message('practitioner') == 'Access denied. practitioner role required.'


class TestNoRequirements:

    @pytest.mark.parametrize('role', [Role.ADMIN, Role.PRACTITIONER])
    def test_any_authenticated_user_is_allowed(self, role):
        assert evaluate_access(state_for(role)).allowed


@pytest.mark.django_db
class TestAuthStateSnapshot:

    def test_for_authenticated_user(self, practitioner):
        state = AuthState.for_user(practitioner)

        assert state.is_authenticated
        assert not state.loading
        assert state.role == Role.PRACTITIONER
        assert state.as_dict() == {
            'is_authenticated': True,
            'loading': False,
            'user': {'role': 'practitioner', 'email': practitioner.email},
        }

    def test_for_anonymous_user(self):
        from django.contrib.auth.models import AnonymousUser

        state = AuthState.for_user(AnonymousUser())

        assert state == AuthState.anonymous()
        assert state.role is None
        assert state.as_dict()['user'] is None

    def test_snapshot_is_immutable(self):
        state = AuthState.anonymous()

        with pytest.raises(AttributeError):
            state.loading = True
