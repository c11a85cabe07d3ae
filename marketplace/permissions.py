from rest_framework import permissions

from utils.rbac import is_seller


class IsSellerOrReadOnly(permissions.BasePermission):
    """
    Anyone may read; only sellers (and admins) may create catalog entries.
    """

    def has_permission(self, request, view):
        # Read permissions are allowed for any request,
        # so we'll always allow GET, HEAD or OPTIONS requests.
        if request.method in permissions.SAFE_METHODS:
            return True

        return request.user.is_authenticated and is_seller(request.user)


class IsSellerUser(permissions.BasePermission):
    """
    Permission to check if user has seller role
    Allows sellers and admins to access seller-only endpoints
    """

    def has_permission(self, request, view):
        # User must be authenticated
        if not request.user.is_authenticated:
            return False

        # Check if user is seller or admin
        return is_seller(request.user)

