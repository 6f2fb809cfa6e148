"""
Identity and role helpers for IAM bindings.

Bindings store members and roles as plain strings. The types here build and
parse those strings, e.g. ``Identity.user("alice@example.com")`` renders as
``"user:alice@example.com"`` and ``Role.viewer()`` as ``"roles/viewer"``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..errors import InvalidArgumentError


class IdentityType(Enum):
    """Kinds of principal a binding member can name."""
    ALL_USERS = "allUsers"
    ALL_AUTHENTICATED_USERS = "allAuthenticatedUsers"
    USER = "user"
    SERVICE_ACCOUNT = "serviceAccount"
    GROUP = "group"
    DOMAIN = "domain"
    PROJECT_OWNER = "projectOwner"
    PROJECT_EDITOR = "projectEditor"
    PROJECT_VIEWER = "projectViewer"


# Types whose string form is the bare type name, without ":value"
_VALUELESS_TYPES = (IdentityType.ALL_USERS, IdentityType.ALL_AUTHENTICATED_USERS)


@dataclass(frozen=True)
class Identity:
    """A binding member: who is being granted a role."""
    type: IdentityType
    value: Optional[str] = None

    @classmethod
    def all_users(cls) -> 'Identity':
        """Anyone on the internet, with or without an account."""
        return cls(IdentityType.ALL_USERS)

    @classmethod
    def all_authenticated_users(cls) -> 'Identity':
        """Anyone authenticated with a Google account or service account."""
        return cls(IdentityType.ALL_AUTHENTICATED_USERS)

    @classmethod
    def user(cls, email: str) -> 'Identity':
        return cls(IdentityType.USER, email)

    @classmethod
    def service_account(cls, email: str) -> 'Identity':
        return cls(IdentityType.SERVICE_ACCOUNT, email)

    @classmethod
    def group(cls, email: str) -> 'Identity':
        return cls(IdentityType.GROUP, email)

    @classmethod
    def domain(cls, domain: str) -> 'Identity':
        return cls(IdentityType.DOMAIN, domain)

    @classmethod
    def project_owner(cls, project_id: str) -> 'Identity':
        return cls(IdentityType.PROJECT_OWNER, project_id)

    @classmethod
    def project_editor(cls, project_id: str) -> 'Identity':
        return cls(IdentityType.PROJECT_EDITOR, project_id)

    @classmethod
    def project_viewer(cls, project_id: str) -> 'Identity':
        return cls(IdentityType.PROJECT_VIEWER, project_id)

    def str_value(self) -> str:
        """Return the member string used in policy bindings."""
        if self.type in _VALUELESS_TYPES:
            return self.type.value
        return f"{self.type.value}:{self.value}"

    @classmethod
    def value_of(cls, identity_str: str) -> 'Identity':
        """
        Parse a member string such as ``"group:admins@example.com"``.

        Raises:
            InvalidArgumentError: if the string is None or has an unknown prefix
        """
        if identity_str is None:
            raise InvalidArgumentError("Identity string cannot be null.", field='identity')

        type_str, sep, value = identity_str.partition(':')
        try:
            identity_type = IdentityType(type_str)
        except ValueError:
            raise InvalidArgumentError(
                f"Illegal identity string: {identity_str!r}", field='identity'
            )

        if identity_type in _VALUELESS_TYPES:
            if sep:
                raise InvalidArgumentError(
                    f"Illegal identity string: {identity_str!r}", field='identity'
                )
            return cls(identity_type)
        if not sep:
            raise InvalidArgumentError(
                f"Illegal identity string: {identity_str!r}", field='identity'
            )
        return cls(identity_type, value)

    def __str__(self) -> str:
        return self.str_value()


@dataclass(frozen=True)
class Role:
    """An IAM role name, e.g. ``roles/viewer``."""
    value: str

    _ROLE_PREFIX = "roles/"
    _CUSTOM_ROLE_PREFIXES = ("projects/", "organizations/")

    @classmethod
    def of(cls, value: str) -> 'Role':
        """
        Return a role for value, adding the ``roles/`` prefix to predefined
        role names that lack it. Custom roles (``projects/...`` or
        ``organizations/...``) are kept as given.
        """
        if value is None:
            raise InvalidArgumentError("The role cannot be null.", field='role')
        if not value.startswith((cls._ROLE_PREFIX,) + cls._CUSTOM_ROLE_PREFIXES):
            value = cls._ROLE_PREFIX + value
        return cls(value)

    @classmethod
    def owner(cls) -> 'Role':
        return cls.of("owner")

    @classmethod
    def editor(cls) -> 'Role':
        return cls.of("editor")

    @classmethod
    def viewer(cls) -> 'Role':
        return cls.of("viewer")

    def __str__(self) -> str:
        return self.value


def member_str(member: Union[str, Identity, None]) -> Optional[str]:
    """Normalize a member argument to its string form, passing None through."""
    if isinstance(member, Identity):
        return member.str_value()
    return member


def role_str(role: Union[str, Role, None]) -> Optional[str]:
    """Normalize a role argument to its string form, passing None through."""
    if isinstance(role, Role):
        return role.value
    return role
