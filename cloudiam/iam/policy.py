"""
IAM policies.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

IAM policies specify access settings for cloud resources. A policy is a list
of bindings; a binding assigns members (user accounts, groups, domains,
service accounts) to a role, a named list of permissions.

Two views of the bindings exist:

- version 0 and 1 policies may be read and edited as a role -> members map
  (``get_bindings``, ``set_bindings``, ``add_identity``, ``remove_identity``,
  ``remove_role``);
- version 3 policies may attach a condition to each binding and may hold
  several bindings for the same role, so only the list view
  (``get_bindings_v3``, ``set_bindings_v3``) is allowed.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ..errors import InvalidArgumentError
from ..util.validation import check_instance, check_no_none, check_not_none, check_state
from .binding import Binding, MemberArg, RoleArg, NULL_ROLE_MESSAGE
from .identity import role_str

logger = logging.getLogger(__name__)

# Policies at this version may carry conditional bindings
CONDITIONAL_POLICY_VERSION = 3

NULL_BINDINGS_MESSAGE = "The provided collection of bindings cannot be null."
NULL_IDENTITY_SET_MESSAGE = "A role cannot be assigned to a null set of identities."
NULL_IDENTITY_MESSAGE = "Null identities are not permitted."


def _check_bindings(bindings: Optional[Iterable[Binding]]) -> List[Binding]:
    """Validate every binding before any builder state is touched."""
    checked = check_no_none(bindings, NULL_BINDINGS_MESSAGE, field='bindings')
    for binding in checked:
        check_not_none(binding.role, NULL_ROLE_MESSAGE, field='role')
        check_not_none(binding.members, NULL_IDENTITY_SET_MESSAGE, field='members')
        check_no_none(binding.members, NULL_IDENTITY_MESSAGE, field='members')
    return checked


def _copy_binding(binding: Binding) -> Binding:
    return (Binding.new_builder()
            .set_role(binding.role)
            .set_members(binding.members)
            .set_condition(binding.condition)
            .build())


@dataclass(frozen=True)
class Policy:
    """
    Immutable IAM policy.

    Build instances with ``Policy.new_builder()``; use ``to_builder()`` for
    read-modify-write edits of a fetched policy.
    """
    bindings: Tuple[Binding, ...] = field(default_factory=tuple)
    etag: Optional[str] = None
    version: int = 0

    def __post_init__(self):
        if self.bindings is not None and not isinstance(self.bindings, tuple):
            object.__setattr__(self, 'bindings', tuple(self.bindings))

    class Builder:
        """Mutable staging object for Policy. Not safe for concurrent use."""

        def __init__(self, policy: Optional['Policy'] = None):
            self._bindings: List[Binding] = []
            self._etag: Optional[str] = None
            self._version: int = 0

            if policy is not None:
                self.set_bindings_v3(policy.bindings)
                self.set_etag(policy.etag)
                self.set_version(policy.version)

        def _check_legacy(self, operation: str) -> None:
            check_state(
                self._version != CONDITIONAL_POLICY_VERSION,
                f"{operation} is not supported with version "
                f"{CONDITIONAL_POLICY_VERSION} policies.",
                version=self._version
            )

        def set_bindings(self, bindings: Mapping[RoleArg, Iterable[MemberArg]]) -> 'Policy.Builder':
            """
            Replaces the builder's bindings with one binding per entry of the
            given role -> members map.

            Raises:
                InvalidArgumentError: if the map is None, or contains a None
                    role, a None member collection or a None member
            """
            check_not_none(bindings, "The provided map of bindings cannot be null.",
                           field='bindings')
            entries = []
            for role, identities in bindings.items():
                check_not_none(role_str(role), NULL_ROLE_MESSAGE, field='role')
                check_not_none(identities, NULL_IDENTITY_SET_MESSAGE, field='members')
                entries.append((role, check_no_none(identities, NULL_IDENTITY_MESSAGE,
                                                    field='members')))

            self._bindings = [
                Binding.new_builder().set_role(role).set_members(members).build()
                for role, members in entries
            ]
            return self

        def set_bindings_v3(self, bindings: Iterable[Binding]) -> 'Policy.Builder':
            """
            Replaces the builder's bindings with copies of the given bindings.

            Raises:
                InvalidArgumentError: if the list is None, or any binding has a
                    None role, a None member collection or a None member
            """
            checked = _check_bindings(bindings)
            self._bindings = [_copy_binding(binding) for binding in checked]
            return self

        def remove_role(self, role: RoleArg) -> 'Policy.Builder':
            """
            Removes the role and all members associated with it.

            Raises:
                InvalidStateError: if the policy version is 3
            """
            self._check_legacy("remove_role")
            role = role_str(role)
            before = len(self._bindings)
            self._bindings = [b for b in self._bindings if b.role != role]
            logger.debug(f"Removed {before - len(self._bindings)} binding(s) for role {role}")
            return self

        def add_identity(self, role: RoleArg, first: MemberArg,
                         *others: MemberArg) -> 'Policy.Builder':
            """
            Adds one or more identities to the policy under the given role.

            The existing binding for the role is replaced by the extended one,
            which moves to the end of the binding list. A new binding is
            appended if the role has none.

            Raises:
                InvalidStateError: if the policy version is 3
                InvalidArgumentError: if the role or any identity is None
            """
            self._check_legacy("add_identity")
            role = check_not_none(role_str(role), NULL_ROLE_MESSAGE, field='role')
            identities = check_no_none((first,) + others, NULL_IDENTITY_MESSAGE,
                                       field='identities')

            for index, binding in enumerate(self._bindings):
                if binding.role == role:
                    updated = binding.to_builder().add_members(*identities).build()
                    del self._bindings[index]
                    self._bindings.append(updated)
                    logger.debug(f"Added {len(identities)} identities to role {role}")
                    return self

            self._bindings.append(
                Binding.new_builder().set_role(role).add_members(*identities).build()
            )
            logger.debug(f"Created binding for role {role}")
            return self

        def remove_identity(self, role: RoleArg, first: MemberArg,
                            *others: MemberArg) -> 'Policy.Builder':
            """
            Removes one or more identities from the binding for the given role.
            Does nothing if the role has no binding. A binding left without
            members is dropped; otherwise it moves to the end of the list.

            Raises:
                InvalidStateError: if the policy version is 3
                InvalidArgumentError: if the role or any identity is None
            """
            self._check_legacy("remove_identity")
            role = check_not_none(role_str(role), NULL_ROLE_MESSAGE, field='role')
            identities = check_no_none((first,) + others, NULL_IDENTITY_MESSAGE,
                                       field='identities')

            for index, binding in enumerate(self._bindings):
                if binding.role == role:
                    updated = binding.to_builder().remove_members(*identities).build()
                    del self._bindings[index]
                    if updated.members:
                        self._bindings.append(updated)
                    else:
                        logger.debug(f"Dropped empty binding for role {role}")
                    break
            return self

        def set_etag(self, etag: Optional[str]) -> 'Policy.Builder':
            """
            Sets the policy's etag.

            Etags are used for optimistic concurrency control. A policy read
            from the service carries the etag of its stored version; sending it
            back with an update makes the service reject the write if the
            policy changed in between. An update without an etag overwrites
            the stored policy blindly.
            """
            self._etag = etag
            return self

        def set_version(self, version: int) -> 'Policy.Builder':
            """
            Sets the version of the policy. Version 0 only permits the owner,
            editor and viewer roles, version 1 permits any role, and version 3
            permits conditional bindings.
            """
            self._version = version
            return self

        def build(self) -> 'Policy':
            """Creates a Policy object."""
            return Policy(
                bindings=tuple(_copy_binding(binding) for binding in self._bindings),
                etag=self._etag,
                version=self._version
            )

    @classmethod
    def new_builder(cls) -> 'Policy.Builder':
        """Returns a builder for Policy objects."""
        return cls.Builder()

    def to_builder(self) -> 'Policy.Builder':
        """Returns a builder containing the properties of this policy."""
        return Policy.Builder(self)

    def get_bindings(self) -> Mapping[str, FrozenSet[str]]:
        """
        Returns the role -> members map of the policy.

        The map has no room for conditions, and when several bindings share a
        role the last one wins.

        Raises:
            InvalidStateError: if the policy version is 3
        """
        check_state(
            self.version != CONDITIONAL_POLICY_VERSION,
            f"get_bindings is not supported with version "
            f"{CONDITIONAL_POLICY_VERSION} policies.",
            version=self.version
        )
        bindings = {}
        for binding in self.bindings:
            bindings[binding.role] = frozenset(binding.members)
        return MappingProxyType(bindings)

    def get_bindings_v3(self) -> Tuple[Binding, ...]:
        """Returns every binding of the policy, conditions included."""
        return self.bindings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result = {
            'bindings': [binding.to_dict() for binding in self.bindings],
            'version': self.version
        }
        if self.etag is not None:
            result['etag'] = self.etag
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_version: int = 0) -> 'Policy':
        """
        Create from dictionary representation. A missing or null version
        falls back to default_version.

        Raises:
            InvalidArgumentError: if the document is not a mapping, the
                bindings are not a list of binding mappings, the etag is not
                a string or the version is not an integer
        """
        check_instance(data, Mapping, "A policy document must be a mapping.", field='policy')

        bindings = data.get('bindings')
        if bindings is None:
            bindings = []
        check_instance(bindings, (list, tuple), "Bindings must be a list.", field='bindings')

        etag = data.get('etag')
        if etag is not None:
            check_instance(etag, str, "The etag must be a string.", field='etag')

        version = data.get('version')
        if version is None:
            version = default_version
        # bool is an int subclass but never a meaningful version
        if isinstance(version, bool) or not isinstance(version, (int, str)):
            raise InvalidArgumentError(
                f"The version must be an integer. Got {type(version).__name__}.",
                field='version'
            )
        try:
            version = int(version)
        except ValueError as e:
            raise InvalidArgumentError(
                f"The version must be an integer. Got {version!r}.", field='version', cause=e
            )

        return (cls.new_builder()
                .set_bindings_v3([Binding.from_dict(b) for b in bindings])
                .set_etag(etag)
                .set_version(version)
                .build())
