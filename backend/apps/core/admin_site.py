# apps/core/admin_site.py

from django import forms
from django.contrib.admin import AdminSite
from django.contrib.auth.forms import AuthenticationForm
from django.utils.translation import gettext_lazy as _


class EmailAuthenticationForm(AuthenticationForm):
    """
    Authentication form that labels the username field as an email address.
    """
    username = forms.EmailField(
        label=_("Email address"),
        widget=forms.EmailInput(attrs={
            'autofocus': True,
            'autocapitalize': 'none',
            'autocomplete': 'email',
        })
    )


class PortalAdminSite(AdminSite):
    """
    Django admin for staff. Lives at /django-admin/ because /admin belongs to
    the portal's own admin area.
    """
    site_header = "Practice Portal Administration"
    site_title = "Practice Portal Admin"
    index_title = "Practice Portal Administration"

    login_form = EmailAuthenticationForm

    def has_permission(self, request):
        return request.user.is_active and request.user.is_staff


custom_admin_site = PortalAdminSite(name='custom_admin')
