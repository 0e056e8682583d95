"""
Payment modal.

Hosts the Stripe Payment Element for a payment intent created elsewhere.
The modal holds no payment state of its own: it decides what to show, mounts
the checkout form while it has something to confirm, and reports how the
session ended.

Each ``open`` call starts a session and returns a Future that resolves once
with a ``PaymentResult``. The ``on_open_change`` and ``on_success`` callbacks
fire as well, close first and success second.
"""
import enum
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Callable, Optional

from django.conf import settings

from apps.ui.currency import format_pence

from .checkout import DEFAULT_SUBMIT_LABEL, StripeCheckout
from .services import StripeCheckoutService, is_stripe_configured

logger = logging.getLogger(__name__)

DEFAULT_TITLE = 'Complete payment'
AMOUNT_DESCRIPTION = 'Enter your payment details below to complete the payment.'


class PaymentOutcome(enum.Enum):
    SUCCEEDED = 'succeeded'
    CANCELLED = 'cancelled'
    FAILED = 'failed'


@dataclass(frozen=True)
class PaymentResult:
    outcome: PaymentOutcome
    reason: Optional[str] = None

    @classmethod
    def succeeded(cls) -> 'PaymentResult':
        return cls(PaymentOutcome.SUCCEEDED)

    @classmethod
    def cancelled(cls) -> 'PaymentResult':
        return cls(PaymentOutcome.CANCELLED)

    @classmethod
    def failed(cls, reason: str) -> 'PaymentResult':
        return cls(PaymentOutcome.FAILED, reason)


def payment_appearance() -> dict:
    """Appearance options for the Payment Element."""
    return {
        'theme': 'stripe',
        'variables': {
            'colorPrimary': settings.PRIMARY_COLOR_HEX,
        },
    }


class PaymentModal:
    """
    Modal wrapping the checkout form.

    Outside clicks are ignored while a submission is in flight. Closing the
    modal drops the mounted form and the client secret, so reopening starts
    from a clean form.
    """

    def __init__(self,
                 on_open_change: Optional[Callable[[bool], None]] = None,
                 on_success: Optional[Callable[[], None]] = None,
                 service: Optional[StripeCheckoutService] = None):
        self.on_open_change = on_open_change
        self.on_success = on_success
        self.service = service

        self.is_open = False
        self.is_processing = False
        self.client_secret: Optional[str] = None
        self.amount_pence: Optional[int] = None
        self.explicit_title: Optional[str] = None
        self.last_error: Optional[str] = None

        self._form: Optional[StripeCheckout] = None
        self._result: Optional[Future] = None

    def open(self, client_secret: Optional[str], amount_pence: Optional[int] = None,
             title: Optional[str] = None) -> Future:
        """Start a payment session and return its result future."""
        if self._result is not None and not self._result.done():
            self._settle(PaymentResult.cancelled())

        self.client_secret = client_secret
        self.amount_pence = amount_pence
        self.explicit_title = title
        self.last_error = None
        self.is_processing = False
        self._form = None
        self._result = Future()

        self.is_open = True
        if self.on_open_change:
            self.on_open_change(True)
        return self._result

    @property
    def result(self) -> Optional[Future]:
        return self._result

    # Display

    @property
    def amount_formatted(self) -> Optional[str]:
        if self.amount_pence is None:
            return None
        return format_pence(self.amount_pence)

    @property
    def title(self) -> str:
        if self.explicit_title is not None:
            return self.explicit_title
        if self.amount_formatted:
            return f"Pay {self.amount_formatted}"
        return DEFAULT_TITLE

    @property
    def description(self) -> Optional[str]:
        return AMOUNT_DESCRIPTION if self.amount_formatted else None

    @property
    def submit_label(self) -> str:
        if self.amount_formatted:
            return f"Pay {self.amount_formatted}"
        return DEFAULT_SUBMIT_LABEL

    @property
    def should_mount_form(self) -> bool:
        return self.is_open and bool(self.client_secret) and is_stripe_configured()

    @property
    def elements_options(self) -> dict:
        return {
            'clientSecret': self.client_secret,
            'appearance': payment_appearance(),
        }

    def mount_form(self) -> Optional[StripeCheckout]:
        """The checkout form for this session, or None while nothing can be paid."""
        if not self.should_mount_form:
            return None
        if self._form is None:
            self._form = StripeCheckout(
                on_success=self.handle_success,
                on_cancel=self.handle_cancel,
                on_processing_change=self.set_processing,
                on_error=self.handle_failure,
                submit_label=self.submit_label,
                service=self.service,
            )
        return self._form

    def context(self) -> dict:
        """Template context for ``payments/payment_modal.html``."""
        return {
            'open': self.is_open,
            'title': self.title,
            'description': self.description,
            'submit_label': self.submit_label,
            'mount_form': self.should_mount_form,
            'client_secret': self.client_secret,
            'elements_options': self.elements_options,
            'publishable_key': settings.STRIPE_PUBLISHABLE_KEY,
        }

    # Events

    def set_processing(self, processing: bool) -> None:
        self.is_processing = processing

    def handle_success(self) -> None:
        logger.info("Payment confirmed, closing payment modal")
        self._close()
        if self.on_success:
            self.on_success()
        self._settle(PaymentResult.succeeded())

    def handle_cancel(self) -> None:
        self._close()
        if self.last_error:
            self._settle(PaymentResult.failed(self.last_error))
        else:
            self._settle(PaymentResult.cancelled())

    def handle_failure(self, reason: str) -> None:
        """A submission failed; the form stays open so the user can retry."""
        logger.info(f"Payment attempt failed: {reason}")
        self.last_error = reason

    def handle_pointer_down_outside(self) -> bool:
        """Returns True when the click dismissed the modal."""
        if not self.is_open:
            return False
        if self.is_processing:
            return False
        self.handle_cancel()
        return True

    def handle_open_change(self, open: bool) -> None:
        """Close button or Escape from the dialog itself."""
        if not open and self.is_open:
            self.handle_cancel()

    def _close(self) -> None:
        self.is_open = False
        self.is_processing = False
        self.client_secret = None
        self._form = None
        if self.on_open_change:
            self.on_open_change(False)

    def _settle(self, result: PaymentResult) -> None:
        if self._result is not None and not self._result.done():
            self._result.set_result(result)
