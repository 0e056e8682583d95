"""
Role-based permissions for API views.
"""
from rest_framework.permissions import BasePermission


def role_required(*roles):
    """
    Build a permission class that admits authenticated users holding one of
    ``roles``. Unauthenticated requests get 401, the wrong role gets 403.
    """

    class RoleRequired(BasePermission):
        message = 'Insufficient permissions'

        def has_permission(self, request, view):
            user = request.user
            if not user or not user.is_authenticated:
                return False
            return getattr(user, 'role', None) in roles

    RoleRequired.__name__ = f"RoleRequired({', '.join(roles)})"
    return RoleRequired
