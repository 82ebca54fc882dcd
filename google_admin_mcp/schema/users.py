"""Text rendering of Directory API user resources."""

from typing import Any, NamedTuple


class DetailField(NamedTuple):
    """One line of the user detail block."""

    label: str
    path: str
    default: Any


# Ordered label -> response field -> placeholder table for `getUser`.
USER_DETAIL_FIELDS: tuple[DetailField, ...] = (
    DetailField("Email", "primaryEmail", "Unknown"),
    DetailField("Name", "name.fullName", "Unknown"),
    DetailField("ID", "id", "Unknown"),
    DetailField("Admin", "isAdmin", False),
    DetailField("Suspended", "suspended", False),
    DetailField("Last Login", "lastLoginTime", "Never"),
    DetailField("Created", "creationTime", "Unknown"),
    DetailField("Org Unit", "orgUnitPath", "Default"),
    DetailField("Aliases", "aliases", "None"),
    DetailField("2FA Enabled", "isEnrolledIn2Sv", False),
    DetailField("2FA Enforcement", "isEnforcedIn2Sv", False),
    DetailField("IP Whitelisted", "ipWhitelisted", False),
    DetailField("Recovery Email", "recoveryEmail", "Not set"),
    DetailField("Recovery Phone", "recoveryPhone", "Not set"),
    DetailField("Suspension Reason", "suspensionReason", "Not specified"),
)


def _lookup(user: dict[str, Any], path: str) -> Any:
    value: Any = user
    for key in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def field_value(user: dict[str, Any], field: DetailField) -> str:
    """Return the rendered value of `field`, or its placeholder when unset.

    Missing keys, None, empty strings and empty lists all count as unset.
    """
    value = _lookup(user, field.path)
    if value is None or value == "" or value == [] or value is False:
        value = field.default
    return _render(value)


def full_name(user: dict[str, Any]) -> str:
    """The user's full name, or "Unknown"."""
    return _lookup(user, "name.fullName") or "Unknown"


def format_user_line(user: dict[str, Any]) -> str:
    return f"{user.get('primaryEmail')} ({full_name(user)})"


def format_user_list(users: list[dict[str, Any]]) -> str:
    if not users:
        return "No users found."
    return "Users:\n" + "\n".join(format_user_line(user) for user in users)


def format_user_details(user: dict[str, Any]) -> str:
    lines = [f"{field.label}: {field_value(user, field)}" for field in USER_DETAIL_FIELDS]
    return "User Details:\n" + "\n".join(lines)


def format_created_user(user: dict[str, Any], password: str) -> str:
    return (
        "User created successfully:\n"
        f"Email: {user.get('primaryEmail')}\n"
        f"Name: {full_name(user)}\n"
        f"Initial Password: {password}\n"
        "\n"
        "Note: User must change password on first login."
    )


def format_suspension(user: dict[str, Any], suspended: bool) -> str:
    verb = "suspended" if suspended else "unsuspended"
    return (
        f"User {verb} successfully:\n"
        f"Email: {user.get('primaryEmail')}\n"
        f"Name: {full_name(user)}"
    )
