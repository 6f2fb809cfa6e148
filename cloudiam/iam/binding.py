"""
IAM role bindings.

A binding assigns a role to an ordered list of members, optionally scoped by
a condition. Members are plain strings such as ``"user:alice@example.com"``;
duplicates are kept and order is preserved.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..util.validation import check_instance, check_no_none, check_not_none, check_state
from .condition import Condition
from .identity import Identity, Role, member_str, role_str

NULL_ROLE_MESSAGE = "The role cannot be null."
NULL_MEMBERS_MESSAGE = "Null members are not permitted."

MemberArg = Union[str, Identity]
RoleArg = Union[str, Role]


@dataclass(frozen=True)
class Binding:
    """
    Immutable binding of a role to members.

    Build instances with ``Binding.new_builder()``; use ``to_builder()`` to
    derive a modified copy. The builder is the validated path: the plain
    constructor only normalizes ``Role``/``Identity`` arguments to strings and
    leaves None in place, which Policy builders then reject.
    """
    role: str
    members: Tuple[str, ...] = field(default_factory=tuple)
    condition: Optional[Condition] = None

    def __post_init__(self):
        object.__setattr__(self, 'role', role_str(self.role))
        if self.members is not None:
            object.__setattr__(self, 'members',
                               tuple(member_str(member) for member in self.members))

    class Builder:
        """Mutable staging object for Binding."""

        def __init__(self, binding: Optional['Binding'] = None):
            self._role: Optional[str] = None
            self._members: List[str] = []
            self._condition: Optional[Condition] = None

            if binding is not None:
                self.set_role(binding.role)
                self.set_members(binding.members)
                self.set_condition(binding.condition)

        def set_role(self, role: RoleArg) -> 'Binding.Builder':
            """
            Sets the binding's role.

            Raises:
                InvalidArgumentError: if role is None
            """
            self._role = check_not_none(role_str(role), NULL_ROLE_MESSAGE, field='role')
            return self

        def set_members(self, members: Iterable[MemberArg]) -> 'Binding.Builder':
            """
            Replaces the builder's members, keeping the given order.

            Raises:
                InvalidArgumentError: if members is None or contains None
            """
            checked = check_no_none(members, NULL_MEMBERS_MESSAGE, field='members')
            self._members = [member_str(member) for member in checked]
            return self

        def add_members(self, first: MemberArg, *others: MemberArg) -> 'Binding.Builder':
            """
            Appends one or more members.

            Raises:
                InvalidArgumentError: if any member is None
            """
            checked = check_no_none((first,) + others, NULL_MEMBERS_MESSAGE, field='members')
            self._members.extend(member_str(member) for member in checked)
            return self

        def remove_members(self, first: MemberArg, *others: MemberArg) -> 'Binding.Builder':
            """
            Removes one occurrence of each given member. Members that are not
            present are ignored.

            Raises:
                InvalidArgumentError: if any member is None
            """
            checked = check_no_none((first,) + others, NULL_MEMBERS_MESSAGE, field='members')
            for member in checked:
                member = member_str(member)
                if member in self._members:
                    self._members.remove(member)
            return self

        def set_condition(self, condition: Optional[Condition]) -> 'Binding.Builder':
            self._condition = condition
            return self

        def build(self) -> 'Binding':
            """
            Creates a Binding object.

            Raises:
                InvalidStateError: if no role was set
            """
            check_state(self._role is not None, NULL_ROLE_MESSAGE)
            return Binding(
                role=self._role,
                members=tuple(self._members),
                condition=self._condition
            )

    @classmethod
    def new_builder(cls) -> 'Binding.Builder':
        """Returns a builder for Binding objects."""
        return cls.Builder()

    def to_builder(self) -> 'Binding.Builder':
        """Returns a builder containing the properties of this binding."""
        return Binding.Builder(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        result = {
            'role': self.role,
            'members': list(self.members)
        }
        if self.condition is not None:
            result['condition'] = self.condition.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Binding':
        """
        Create from dictionary representation, validating through the builder.

        Raises:
            InvalidArgumentError: if data is not a mapping, the role or a
                member is missing or not a string, or the condition is not a
                mapping
        """
        check_instance(data, Mapping, "A binding must be a mapping.", field='binding')
        role = check_not_none(data.get('role'), NULL_ROLE_MESSAGE, field='role')
        check_instance(role, str, "The role must be a string.", field='role')

        members = data.get('members')
        if members is None:
            members = []
        check_instance(members, (list, tuple), "Members must be a list.", field='members')
        for member in members:
            check_instance(member, str, "Members must be strings.", field='members')

        builder = cls.new_builder().set_role(role).set_members(members)
        condition = data.get('condition')
        if condition is not None:
            check_instance(condition, Mapping, "A condition must be a mapping.",
                           field='condition')
            builder.set_condition(Condition.from_dict(condition))
        return builder.build()
