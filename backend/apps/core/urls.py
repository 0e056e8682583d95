"""
URL configuration for the gated pages.
"""
from django.contrib.auth import views as auth_views
from django.urls import path

from . import views
from .admin_site import EmailAuthenticationForm

urlpatterns = [
    path(
        'login',
        auth_views.LoginView.as_view(
            template_name='core/login.html',
            authentication_form=EmailAuthenticationForm,
        ),
        name='login'
    ),
    path('logout', auth_views.LogoutView.as_view(), name='logout'),
    path('dashboard', views.dashboard, name='dashboard'),
    path('admin', views.admin_dashboard, name='admin-dashboard'),
]
