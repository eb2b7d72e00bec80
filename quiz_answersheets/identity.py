"""User display names and identity details."""

from __future__ import annotations

from loguru import logger

from config import get_settings

from .models import ModuleContext, UserRecord
from .strings import PLUGIN_COMPONENT, StringCatalog, get_string_manager


def fullname(user: UserRecord, name_format: str | None = None) -> str:
    """Display name of a user following the configured name format."""
    name_format = name_format or get_settings().fullname_format
    return name_format.format(firstname=user.firstname, lastname=user.lastname).strip()


def format_user_identity(
    user: UserRecord,
    context: ModuleContext,
    identity_fields: list[str] | None = None,
    strings: StringCatalog | None = None,
) -> str:
    """
    Full name followed by the non-empty extra identity fields.

    Args:
        user: User whose details are shown
        context: Module context the identity fields are configured for
        identity_fields: Field names in display order (defaults to settings)
        strings: String catalog (defaults to the shared catalog)

    Returns:
        e.g. "Ann Smith (ann@example.com, S123)", or just "Ann Smith"
    """
    if identity_fields is None:
        identity_fields = get_settings().get_identity_fields()
    strings = strings or get_string_manager()
    logger.debug(f"Identity fields for context {context.id}: {identity_fields}")

    userinfo = fullname(user)

    data = []
    for name in identity_fields:
        value = getattr(user, name, None)
        if not value:
            continue
        data.append(str(value))

    if data:
        userinfo += strings.get_string("user_identity_fields", PLUGIN_COMPONENT, ", ".join(data))

    return userinfo
