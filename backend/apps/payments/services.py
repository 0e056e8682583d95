"""
Stripe access for the payment confirmation flow.

Payment intents are created elsewhere; this service only reads them back so
the portal can report what the hosted Payment Element did.
"""
import stripe

from django.conf import settings

from apps.core.services.base import BaseService, ServiceException, ServiceResult

CLIENT_SECRET_SEPARATOR = '_secret_'


class InvalidClientSecret(ServiceException):
    """Raised when a client secret does not belong to a payment intent."""

    def __init__(self, message: str = 'Invalid payment intent client secret'):
        super().__init__(message, code='INVALID_CLIENT_SECRET')


def is_stripe_configured() -> bool:
    """Stripe is usable only with a real publishable key (pk_*)."""
    key = getattr(settings, 'STRIPE_PUBLISHABLE_KEY', '') or ''
    return key.startswith('pk_')


def intent_id_from_client_secret(client_secret: str) -> str:
    """
    'pi_123_secret_abc' -> 'pi_123'.

    Raises:
        InvalidClientSecret: if the secret is not a payment intent secret
    """
    intent_id, separator, _ = (client_secret or '').partition(CLIENT_SECRET_SEPARATOR)
    if not separator or not intent_id.startswith('pi_'):
        raise InvalidClientSecret()
    return intent_id


class StripeCheckoutService(BaseService):
    """
    Reads payment intents back from Stripe.
    """

    def __init__(self):
        super().__init__()
        stripe.api_key = settings.STRIPE_SECRET_KEY
        self.publishable_key = settings.STRIPE_PUBLISHABLE_KEY

    def retrieve_intent(self, intent_id: str) -> ServiceResult:
        """
        Fetch a payment intent.

        Returns:
            ServiceResult with the PaymentIntent, or NOT_FOUND / STRIPE_ERROR
        """
        if not intent_id or not intent_id.startswith('pi_'):
            return ServiceResult.fail(
                'Invalid payment intent ID format',
                error_code='INVALID_INTENT_ID'
            )

        try:
            payment_intent = stripe.PaymentIntent.retrieve(intent_id)
        except stripe.InvalidRequestError as e:
            self.log_warning(
                f"Payment intent {intent_id} not found",
                intent_id=intent_id,
                error=str(e)
            )
            return ServiceResult.fail(
                'Payment intent not found',
                error_code='NOT_FOUND'
            )
        except stripe.StripeError as e:
            self.log_error(
                f"Error retrieving payment intent {intent_id}",
                exception=e,
                intent_id=intent_id
            )
            return ServiceResult.fail(
                e.user_message or str(e),
                error_code='STRIPE_ERROR'
            )

        self.log_info(
            f"Retrieved payment intent {intent_id} with status {payment_intent.status}",
            intent_id=intent_id,
            status=payment_intent.status
        )
        return ServiceResult.ok(payment_intent)

    def retrieve_intent_for_client_secret(self, client_secret: str) -> ServiceResult:
        try:
            intent_id = intent_id_from_client_secret(client_secret)
        except InvalidClientSecret as e:
            return ServiceResult.fail(str(e), error_code=e.code)
        return self.retrieve_intent(intent_id)
