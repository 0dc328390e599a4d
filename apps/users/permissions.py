from __future__ import annotations

from rest_framework.permissions import BasePermission


class RequireAdminRole(BasePermission):
    """
    Allow only back-office admins (role ``admin``) or superusers.
    """

    allowed_roles = {"admin"}

    @classmethod
    def allowed(cls, user) -> bool:
        if not user or not getattr(user, 'is_authenticated', False):
            return False
        role = getattr(user, 'role', None)
        return (role or '') in cls.allowed_roles or getattr(user, 'is_superuser', False)

    def has_permission(self, request, view):
        return self.allowed(getattr(request, 'user', None))
