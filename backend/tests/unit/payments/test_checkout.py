"""
Unit tests for the checkout form state.
"""
import pytest
from unittest.mock import MagicMock

from apps.core.services.base import ServiceResult
from apps.payments.checkout import (
    DEFAULT_ERROR_MESSAGE,
    PROCESSING_MESSAGE,
    Confirmation,
    StripeCheckout,
    interpret_confirmation,
)


def intent(status):
    return ServiceResult.ok(MagicMock(id='pi_test_123', status=status))


class TestInterpretConfirmation:

    def test_succeeded(self):
        assert interpret_confirmation(intent('succeeded')) == Confirmation(succeeded=True)

    def test_processing(self):
        assert interpret_confirmation(intent('processing')) == Confirmation(
            status_message=PROCESSING_MESSAGE)

    def test_error_uses_message(self):
        confirmation = interpret_confirmation(ServiceResult.fail('Your card was declined.'))

        assert confirmation.error_message == 'Your card was declined.'
        assert not confirmation.succeeded

    def test_error_without_message(self):
        confirmation = interpret_confirmation(ServiceResult.fail(None))

        assert confirmation.error_message == DEFAULT_ERROR_MESSAGE

    @pytest.mark.parametrize('status', ['requires_action', 'requires_payment_method'])
    def test_other_statuses_change_nothing(self, status):
        assert interpret_confirmation(intent(status)) == Confirmation()


class TestSubmit:

    def test_success_fires_callback(self):
        on_success = MagicMock()
        checkout = StripeCheckout(on_success=on_success)

        confirmation = checkout.submit(lambda: intent('succeeded'))

        assert confirmation.succeeded
        on_success.assert_called_once_with()
        assert checkout.is_processing is False

    def test_error_sets_message_and_keeps_form(self):
        on_success = MagicMock()
        on_error = MagicMock()
        checkout = StripeCheckout(on_success=on_success, on_error=on_error)

        checkout.submit(lambda: ServiceResult.fail('Your card was declined.'))

        assert checkout.error_message == 'Your card was declined.'
        on_error.assert_called_once_with('Your card was declined.')
        on_success.assert_not_called()

    def test_processing_status_message(self):
        checkout = StripeCheckout()

        checkout.submit(lambda: intent('processing'))

        assert checkout.status_message == PROCESSING_MESSAGE
        assert checkout.error_message is None

    def test_new_attempt_clears_previous_messages(self):
        checkout = StripeCheckout()
        checkout.submit(lambda: ServiceResult.fail('Your card was declined.'))

        checkout.submit(lambda: intent('requires_action'))

        assert checkout.error_message is None
        assert checkout.status_message is None

    def test_processing_change_notifications(self):
        changes = []
        checkout = StripeCheckout(on_processing_change=changes.append)

        checkout.submit(lambda: intent('succeeded'))

        assert changes == [True, False]

    def test_button_label_while_processing(self):
        checkout = StripeCheckout(submit_label='Pay £10.00')
        labels = []

        def confirm():
            labels.append(checkout.button_label)
            return intent('succeeded')

        checkout.submit(confirm)

        assert labels == ['Processing…']
        assert checkout.button_label == 'Pay £10.00'

    def test_disabled_form_does_not_submit(self):
        confirm = MagicMock()
        checkout = StripeCheckout(disabled=True)

        assert checkout.submit(confirm) is None
        confirm.assert_not_called()

    def test_no_double_submission(self):
        checkout = StripeCheckout()
        inner = []

        def confirm():
            inner.append(checkout.submit(lambda: intent('succeeded')))
            return intent('processing')

        checkout.submit(confirm)

        assert inner == [None]

    def test_exception_resets_processing(self):
        changes = []
        checkout = StripeCheckout(on_processing_change=changes.append)

        def confirm():
            raise RuntimeError('network down')

        with pytest.raises(RuntimeError):
            checkout.submit(confirm)

        assert checkout.is_processing is False
        assert changes == [True, False]

    def test_cancel(self):
        on_cancel = MagicMock()

        StripeCheckout(on_cancel=on_cancel).cancel()

        on_cancel.assert_called_once_with()


class TestRedirectReturn:

    def test_succeeded_redirect_fires_success(self, mock_stripe_retrieve):
        on_success = MagicMock()
        checkout = StripeCheckout(on_success=on_success)

        handled = checkout.check_redirect_return({
            'payment_intent_client_secret': 'pi_test_123456789_secret_abc',
            'redirect_status': 'succeeded',
        })

        assert handled is True
        on_success.assert_called_once_with()
        mock_stripe_retrieve.assert_called_once_with('pi_test_123456789')

    @pytest.mark.parametrize('params', [
        {},
        {'redirect_status': 'succeeded'},
        {'payment_intent_client_secret': 'pi_test_1_secret_a', 'redirect_status': 'failed'},
    ])
    def test_nothing_to_check(self, params, mock_stripe_retrieve):
        on_success = MagicMock()

        handled = StripeCheckout(on_success=on_success).check_redirect_return(params)

        assert handled is False
        on_success.assert_not_called()
        mock_stripe_retrieve.assert_not_called()

    def test_intent_not_yet_succeeded(self, mock_stripe_retrieve):
        mock_stripe_retrieve.return_value.status = 'processing'
        on_success = MagicMock()

        handled = StripeCheckout(on_success=on_success).check_redirect_return({
            'payment_intent_client_secret': 'pi_test_123456789_secret_abc',
            'redirect_status': 'succeeded',
        })

        assert handled is False
        on_success.assert_not_called()

    def test_retrieval_failure_sets_error(self):
        service = MagicMock()
        service.retrieve_intent_for_client_secret.return_value = ServiceResult.fail(
            'Payment intent not found', error_code='NOT_FOUND')
        checkout = StripeCheckout(service=service)

        handled = checkout.check_redirect_return({
            'payment_intent_client_secret': 'pi_test_123_secret_abc',
            'redirect_status': 'succeeded',
        })

        assert handled is False
        assert checkout.error_message == 'Payment intent not found'
