"""
Serializers for the payment modal and payment status endpoints.
"""
from rest_framework import serializers

from .checkout import interpret_confirmation
from apps.core.services.base import ServiceResult


class PaymentModalParamsSerializer(serializers.Serializer):
    """
    Query parameters for rendering the payment modal.
    """
    client_secret = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        help_text="Payment intent client secret; no form is shown without it"
    )
    amount_pence = serializers.IntegerField(
        required=False,
        allow_null=True,
        default=None,
        min_value=0,
        help_text="Amount in pence (10500 = £105.00), display only"
    )
    title = serializers.CharField(
        required=False,
        allow_null=True,
        default=None,
        max_length=200
    )

    def validate_client_secret(self, value):
        return value or None


class PaymentStatusSerializer(serializers.Serializer):
    """
    Payment intent status as seen by the checkout form.
    """
    payment_intent_id = serializers.CharField()
    status = serializers.CharField()
    amount = serializers.IntegerField(help_text="Amount in pence")
    currency = serializers.CharField()
    succeeded = serializers.BooleanField()
    message = serializers.CharField(allow_null=True)

    def to_representation(self, instance):
        """
        Args:
            instance: Stripe PaymentIntent
        """
        confirmation = interpret_confirmation(ServiceResult.ok(instance))
        return {
            'payment_intent_id': instance.id,
            'status': instance.status,
            'amount': instance.amount,
            'currency': instance.currency,
            'succeeded': confirmation.succeeded,
            'message': confirmation.status_message,
        }


class PaymentErrorSerializer(serializers.Serializer):
    """
    Consistent error format across payment endpoints.
    """
    error = serializers.CharField(help_text="Error message")
    error_code = serializers.CharField(
        required=False,
        help_text="Machine-readable error code"
    )

    def to_representation(self, instance):
        """
        Args:
            instance: Error dict or failed ServiceResult
        """
        if isinstance(instance, ServiceResult):
            return {
                'error': instance.error,
                'error_code': instance.error_code,
            }
        return {
            'error': instance.get('error'),
            'error_code': instance.get('error_code'),
        }
