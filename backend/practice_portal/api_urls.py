"""
API v1 URL configuration.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.core.views import AuthViewSet, UserViewSet
from apps.payments.views import PaymentStatusView

router = DefaultRouter()
router.register(r'auth', AuthViewSet, basename='auth')
router.register(r'users', UserViewSet, basename='user')

urlpatterns = [
    path('', include(router.urls)),
    path(
        'payments/status/<str:intent_id>/',
        PaymentStatusView.as_view(),
        name='payment-status'
    ),
]
