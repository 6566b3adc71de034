from rest_framework import permissions

from .models import AdminUser


def is_site_admin(user):
    """True when the user is signed in and holds the admin role."""
    if not user or not user.is_authenticated:
        return False
    return AdminUser.objects.filter(user=user, role=AdminUser.ADMIN).exists()


class IsSiteAdmin(permissions.BasePermission):
    message = 'Admin access required.'

    def has_permission(self, request, view):
        return is_site_admin(request.user)


class ReadOnlyOrSiteAdmin(permissions.BasePermission):
    """Anyone may read; writes need an admin role row."""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_site_admin(request.user)
