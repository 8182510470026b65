"""
Permission checks for GraphQL mutations.

Each mutation is gated by its own action name. An action maps to the Django
permission ``crm.<action>`` declared on the owning model's ``Meta``.
"""
import functools
import logging

from crm.errors import LoginRequired, PermissionRequired

logger = logging.getLogger(__name__)


def check_login(user):
    if user is None or not user.is_authenticated:
        raise LoginRequired()


def can(action, user):
    if user is None or not user.is_authenticated or not user.is_active:
        return False

    if getattr(user, "is_owner", False) or user.is_superuser:
        return True

    return user.has_perm(f"crm.{action}")


def check_permission(action):
    """
    Wrap a graphene ``mutate`` so the caller must hold ``action``.

    The check runs before the wrapped resolver is called.
    """

    def decorator(resolver):
        @functools.wraps(resolver)
        def wrapper(root, info, *args, **kwargs):
            user = getattr(info.context, "user", None)

            check_login(user)

            if not can(action, user):
                logger.warning("User %s denied %s", user.pk, action)
                raise PermissionRequired()

            return resolver(root, info, *args, **kwargs)

        wrapper.permission_action = action
        return wrapper

    return decorator
