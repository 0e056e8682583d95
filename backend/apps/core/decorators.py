# apps/core/decorators.py

import logging
from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.shortcuts import redirect, render

from .access import LOGIN_PATH, AccessOutcome, AuthState, evaluate_access

logger = logging.getLogger(__name__)


def protected_route(required_role=None, practitioner_only=False,
                    state_provider=AuthState.from_request):
    """
    Wrap a view with the access gate.

    ``state_provider`` turns the request into an ``AuthState``; override it to
    hand the gate a snapshot resolved elsewhere.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            state = state_provider(request)
            decision = evaluate_access(
                state,
                required_role=required_role,
                practitioner_only=practitioner_only,
            )

            if decision.outcome is AccessOutcome.LOADING:
                return render(request, 'core/loading.html')

            if decision.outcome is AccessOutcome.REDIRECT:
                if decision.redirect_to == LOGIN_PATH:
                    # Full path, query string included, comes back after sign-in
                    return redirect_to_login(request.get_full_path(), LOGIN_PATH)
                return redirect(decision.redirect_to)

            if decision.outcome is AccessOutcome.DENIED:
                logger.info(
                    f"Access denied to {request.path} for role {state.role!r}"
                )
                return render(
                    request,
                    'core/access_denied.html',
                    {'message': decision.message},
                    status=403,
                )

            return view_func(request, *args, **kwargs)

        return _wrapped

    return decorator
