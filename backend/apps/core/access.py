"""
Access gate for protected views.

The gate is a pure decision over an immutable snapshot of the authentication
state. Callers build the snapshot (usually with ``AuthState.from_request``)
and pass it in; nothing here reads ambient request or session state.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from .models import Role

LOGIN_PATH = '/login'
ADMIN_PATH = '/admin'


@dataclass(frozen=True)
class SessionUser:
    """The part of a user the gate cares about."""
    role: Optional[str]
    email: str = ''

    @classmethod
    def from_user(cls, user) -> 'SessionUser':
        return cls(role=getattr(user, 'role', None), email=getattr(user, 'email', ''))


@dataclass(frozen=True)
class AuthState:
    """
    Snapshot of the authentication state.

    ``loading`` is true while the state is still being resolved (for example
    before a client has called ``/api/v1/auth/me/``); the gate never decides
    anything else while loading.
    """
    is_authenticated: bool = False
    loading: bool = False
    user: Optional[SessionUser] = None

    @classmethod
    def pending(cls) -> 'AuthState':
        return cls(is_authenticated=False, loading=True, user=None)

    @classmethod
    def anonymous(cls) -> 'AuthState':
        return cls(is_authenticated=False, loading=False, user=None)

    @classmethod
    def for_user(cls, user) -> 'AuthState':
        if user is None or not getattr(user, 'is_authenticated', False):
            return cls.anonymous()
        return cls(is_authenticated=True, loading=False,
                   user=SessionUser.from_user(user))

    @classmethod
    def from_request(cls, request) -> 'AuthState':
        """Build the snapshot from the user resolved by Django's auth middleware."""
        return cls.for_user(getattr(request, 'user', None))

    @property
    def role(self) -> Optional[str]:
        return self.user.role if self.user else None

    def as_dict(self) -> dict:
        return {
            'is_authenticated': self.is_authenticated,
            'loading': self.loading,
            'user': {'role': self.user.role, 'email': self.user.email} if self.user else None,
        }


class AccessOutcome(enum.Enum):
    LOADING = 'loading'
    REDIRECT = 'redirect'
    DENIED = 'denied'
    ALLOW = 'allow'


@dataclass(frozen=True)
class AccessDecision:
    outcome: AccessOutcome
    redirect_to: Optional[str] = None
    message: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.ALLOW


def denial_message(required_role) -> str:
    return f"Access denied. {required_role} role required."


def evaluate_access(state: AuthState,
                    required_role: Optional[str] = None,
                    practitioner_only: bool = False) -> AccessDecision:
    """
    Decide what a protected view should render for the given auth state.

    Checks run in a fixed order and the first match wins:
    loading, unauthenticated, admin on a practitioner-only view,
    role mismatch, then allow. A missing user counts as a role mismatch.
    """
    if state.loading:
        return AccessDecision(AccessOutcome.LOADING)

    if not state.is_authenticated:
        return AccessDecision(AccessOutcome.REDIRECT, redirect_to=LOGIN_PATH)

    if practitioner_only and state.role == Role.ADMIN:
        return AccessDecision(AccessOutcome.REDIRECT, redirect_to=ADMIN_PATH)

    if required_role and state.role != required_role:
        return AccessDecision(
            AccessOutcome.DENIED,
            message=denial_message(required_role)
        )

    return AccessDecision(AccessOutcome.ALLOW)
