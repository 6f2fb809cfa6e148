"""
IAM binding conditions.

A condition restricts when a binding grants access. It is an opaque
expression here; nothing in this package evaluates it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Condition:
    """
    Immutable condition attached to a binding.

    All fields are optional. An empty string is kept distinct from None.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    expression: Optional[str] = None

    class Builder:
        """Mutable staging object for Condition."""

        def __init__(self, condition: Optional['Condition'] = None):
            self._title = condition.title if condition else None
            self._description = condition.description if condition else None
            self._expression = condition.expression if condition else None

        def set_title(self, title: Optional[str]) -> 'Condition.Builder':
            self._title = title
            return self

        def set_description(self, description: Optional[str]) -> 'Condition.Builder':
            self._description = description
            return self

        def set_expression(self, expression: Optional[str]) -> 'Condition.Builder':
            self._expression = expression
            return self

        def build(self) -> 'Condition':
            return Condition(
                title=self._title,
                description=self._description,
                expression=self._expression
            )

    @classmethod
    def new_builder(cls) -> 'Condition.Builder':
        """Returns a builder for Condition objects."""
        return cls.Builder()

    def to_builder(self) -> 'Condition.Builder':
        """Returns a builder containing the properties of this condition."""
        return Condition.Builder(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'title': self.title,
            'description': self.description,
            'expression': self.expression
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Condition':
        """Create from dictionary representation."""
        return cls(
            title=data.get('title'),
            description=data.get('description'),
            expression=data.get('expression')
        )
