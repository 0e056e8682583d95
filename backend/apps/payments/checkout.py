"""
Payment Element form state.

``StripeCheckout`` holds what the hosted form shows around the Stripe
widget: the processing flag, an error line and a status line. The actual
confirmation call is a black box handed to ``submit``.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from apps.core.services.base import ServiceResult

from .services import StripeCheckoutService

logger = logging.getLogger(__name__)

DEFAULT_SUBMIT_LABEL = 'Pay now'
DEFAULT_ERROR_MESSAGE = 'Payment failed'
RETRIEVAL_ERROR_MESSAGE = 'Payment retrieval failed'
PROCESSING_MESSAGE = 'Payment is processing. You will be notified when it completes.'


@dataclass(frozen=True)
class Confirmation:
    """What a single confirmation attempt means for the form."""
    succeeded: bool = False
    error_message: Optional[str] = None
    status_message: Optional[str] = None


def interpret_confirmation(result: ServiceResult) -> Confirmation:
    """
    Map a confirmation result onto the form.

    A failed result becomes an error line; a ``succeeded`` intent is a
    success; ``processing`` becomes a status line. Any other intent status
    (for example ``requires_action`` before a redirect) leaves the form as is.
    """
    if not result.success:
        return Confirmation(error_message=result.error or DEFAULT_ERROR_MESSAGE)

    status = getattr(result.data, 'status', None)
    if status == 'succeeded':
        return Confirmation(succeeded=True)
    if status == 'processing':
        return Confirmation(status_message=PROCESSING_MESSAGE)
    return Confirmation()


class StripeCheckout:
    """
    Form hosting the Payment Element.

    Callbacks:
        on_success: payment confirmed
        on_cancel: user pressed cancel
        on_processing_change: processing flag changed, so a container can
            refuse to be dismissed mid-submission
        on_error: a confirmation attempt failed, with the error message
    """

    def __init__(self,
                 on_success: Optional[Callable[[], None]] = None,
                 on_cancel: Optional[Callable[[], None]] = None,
                 on_processing_change: Optional[Callable[[bool], None]] = None,
                 on_error: Optional[Callable[[str], None]] = None,
                 submit_label: str = DEFAULT_SUBMIT_LABEL,
                 disabled: bool = False,
                 service: Optional[StripeCheckoutService] = None):
        self.on_success = on_success
        self.on_cancel = on_cancel
        self.on_processing_change = on_processing_change
        self.on_error = on_error
        self.submit_label = submit_label
        self.disabled = disabled
        self.service = service

        self.is_processing = False
        self.error_message: Optional[str] = None
        self.status_message: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        return not self.disabled and not self.is_processing

    @property
    def button_label(self) -> str:
        return 'Processing…' if self.is_processing else self.submit_label

    def _set_processing(self, processing: bool) -> None:
        if processing == self.is_processing:
            return
        self.is_processing = processing
        if self.on_processing_change:
            self.on_processing_change(processing)

    def submit(self, confirm: Callable[[], ServiceResult]) -> Optional[Confirmation]:
        """
        Run one confirmation attempt.

        ``confirm`` performs the confirmation and returns a ServiceResult
        holding the payment intent. Returns None when the form cannot submit.
        """
        if not self.can_submit:
            return None

        self._set_processing(True)
        self.error_message = None
        self.status_message = None

        try:
            result = confirm()
        except Exception:
            self._set_processing(False)
            raise

        confirmation = interpret_confirmation(result)
        self.error_message = confirmation.error_message
        self.status_message = confirmation.status_message
        self._set_processing(False)

        if confirmation.succeeded:
            if self.on_success:
                self.on_success()
        elif confirmation.error_message and self.on_error:
            self.on_error(confirmation.error_message)

        return confirmation

    def cancel(self) -> None:
        if self.on_cancel:
            self.on_cancel()

    def check_redirect_return(self, params: Mapping[str, str]) -> bool:
        """
        Handle the return from a redirect-based authentication (3-D Secure).

        Stripe appends ``payment_intent_client_secret`` and
        ``redirect_status`` to the return URL. Only a ``succeeded`` redirect is
        checked against Stripe; returns True when success fired.
        """
        client_secret = params.get('payment_intent_client_secret')
        redirect_status = params.get('redirect_status')
        if not client_secret or redirect_status != 'succeeded':
            return False

        service = self.service or StripeCheckoutService()
        result = service.retrieve_intent_for_client_secret(client_secret)
        if not result.success:
            logger.error(f"retrieve payment intent failed: {result.error}")
            self.error_message = result.error or RETRIEVAL_ERROR_MESSAGE
            return False

        if result.data.status != 'succeeded':
            return False

        if self.on_success:
            self.on_success()
        return True
