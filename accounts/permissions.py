"""Role-based DRF permissions for the back-office APIs."""

from rest_framework import permissions


def _role(user):
    return getattr(user, 'role', None)


class IsShopStaff(permissions.BasePermission):
    """
    Admins and shop managers: catalog, purchasing, coupons and orders.
    """
    message = 'Shop staff access required.'
    allowed_roles = ('admin', 'shopmanager')

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.is_superuser or _role(user) in self.allowed_roles


class IsContentStaff(IsShopStaff):
    """
    Shop staff plus market managers: blogs, testimonials and banners.
    """
    message = 'Content staff access required.'
    allowed_roles = ('admin', 'shopmanager', 'marketmanager')
