import logging

from django.contrib.auth import get_user_model

# Canonical role names
ROLE_BUYER = "buyer"
ROLE_SELLER = "seller"
ROLE_ADMIN = "admin"

logger = logging.getLogger(__name__)


def _fetch_user_from_db(user):
    """Fetch a fresh copy of the user from the DB with only the fields we need.

    Falls back to None if user is not authenticated or lookup fails.
    """
    if not getattr(user, "is_authenticated", False):
        return None
    User = get_user_model()
    # Only load minimal fields required for RBAC checks
    return User.objects.only("id", "role", "is_superuser").filter(pk=getattr(user, "pk", None)).first()


def is_admin(user) -> bool:
    """Consistent admin check across the codebase, verified against the database."""
    db_user = _fetch_user_from_db(user)
    if not db_user:
        return False
    return bool(getattr(db_user, "is_superuser", False) or getattr(db_user, "role", None) == ROLE_ADMIN)


def is_seller(user) -> bool:
    """Consistent seller check across the codebase, verified against the database.

    Admins are considered sellers as well.
    """
    db_user = _fetch_user_from_db(user)
    if not db_user:
        return False
    if getattr(db_user, "role", None) == ROLE_SELLER:
        return True
    if is_admin(db_user):
        return True
    logger.debug("RBAC seller check failed: user_id=%s role=%s", db_user.pk, getattr(db_user, "role", None))
    return False
