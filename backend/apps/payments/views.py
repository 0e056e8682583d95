"""
Views for the payment confirmation flow.
Renders the payment modal, handles the Stripe redirect return and reports
payment intent status.
"""
import logging

from rest_framework import views, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.contrib import messages
from django.http import HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme

from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes as Types

from apps.core.decorators import protected_route
from .checkout import StripeCheckout
from .modal import PaymentModal
from .serializers import (
    PaymentErrorSerializer,
    PaymentModalParamsSerializer,
    PaymentStatusSerializer,
)
from .services import StripeCheckoutService

logger = logging.getLogger(__name__)

DEFAULT_RETURN_PATH = '/dashboard'


@protected_route()
def payment_modal(request):
    """
    Render the payment modal for a payment intent.

    GET /payments/modal?client_secret=pi_xxx_secret_yyy&amount_pence=10500
    """
    params = PaymentModalParamsSerializer(data=request.GET)
    if not params.is_valid():
        logger.warning(f"Rejected payment modal parameters: {params.errors}")
        return HttpResponseBadRequest('Invalid payment parameters')

    modal = PaymentModal()
    modal.open(
        params.validated_data['client_secret'],
        amount_pence=params.validated_data['amount_pence'],
        title=params.validated_data['title'],
    )

    return render(request, 'payments/payment_modal.html', modal.context())


@protected_route()
def payment_return(request):
    """
    Landing page for Stripe's redirect after 3-D Secure.

    GET /payments/return?payment_intent_client_secret=...&redirect_status=succeeded&next=/bookings
    """
    def on_success():
        messages.success(request, 'Payment completed successfully.')

    checkout = StripeCheckout(on_success=on_success)
    if not checkout.check_redirect_return(request.GET) and checkout.error_message:
        messages.error(request, checkout.error_message)

    next_url = request.GET.get('next', DEFAULT_RETURN_PATH)
    if not url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        next_url = DEFAULT_RETURN_PATH
    return redirect(next_url)


class PaymentStatusView(views.APIView):
    """
    Get the current status of a payment intent.

    GET /api/v1/payments/status/<intent_id>/

    Response:
        {
            "payment_intent_id": "pi_xxx",
            "status": "processing",
            "amount": 10500,
            "currency": "gbp",
            "succeeded": false,
            "message": "Payment is processing. You will be notified when it completes."
        }
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get payment intent status",
        description="""
        Retrieve a Stripe payment intent and describe it the way the
        checkout form does.

        **Payment Statuses:**
        - `requires_payment_method`: Waiting for payment method
        - `requires_action`: Requires 3D Secure or other action
        - `processing`: Payment is processing
        - `succeeded`: Payment completed successfully
        - `canceled`: Payment was canceled
        """,
        parameters=[
            OpenApiParameter(
                name='intent_id',
                type=Types.STR,
                location=OpenApiParameter.PATH,
                description='Stripe payment intent ID (starts with "pi_")'
            ),
        ],
        responses={
            200: PaymentStatusSerializer,
            400: PaymentErrorSerializer,
            404: PaymentErrorSerializer,
        },
        tags=['Payments']
    )
    def get(self, request, intent_id):
        result = StripeCheckoutService().retrieve_intent(intent_id)

        if not result.success:
            response_status = (
                status.HTTP_404_NOT_FOUND
                if result.error_code == 'NOT_FOUND'
                else status.HTTP_400_BAD_REQUEST
            )
            return Response(
                PaymentErrorSerializer(result).data,
                status=response_status
            )

        return Response(
            PaymentStatusSerializer(result.data).data,
            status=status.HTTP_200_OK
        )
