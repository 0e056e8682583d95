"""
URL configuration for payment pages.
"""
from django.urls import path

from . import views

app_name = 'payments'

urlpatterns = [
    path('modal', views.payment_modal, name='payment-modal'),
    path('return', views.payment_return, name='payment-return'),
]
