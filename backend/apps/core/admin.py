# apps/core/admin.py

from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _
from .models import User
from .admin_site import custom_admin_site


class CustomUserAdmin(BaseUserAdmin):
    """UserAdmin that works with email as USERNAME_FIELD and shows the role."""

    list_display = ('email', 'first_name', 'last_name',
                    'role', 'status', 'is_staff')
    list_filter = ('role', 'status', 'is_staff', 'is_active')

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        (_('Personal info'), {
         'fields': ('first_name', 'last_name', 'phone')}),
        (_('Portal access'), {'fields': ('role', 'status')}),
        (_('Permissions'), {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        (_('Important dates'), {'fields': ('last_login', 'date_joined')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'role', 'password1', 'password2'),
        }),
    )

    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('email',)
    filter_horizontal = ('groups', 'user_permissions',)


custom_admin_site.register(User, CustomUserAdmin)
