"""
Payments app: the payment modal hosting Stripe's Payment Element and the
payment intent status endpoint.
"""
