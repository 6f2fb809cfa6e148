"""
Validation utilities for cloudiam.
Precondition checks shared by the policy builders.
"""

from typing import Any, Iterable, Optional, Tuple, TypeVar, Union

from ..errors import InvalidArgumentError, InvalidStateError

T = TypeVar('T')


def check_not_none(value: Optional[T], message: str,
                   field: Optional[str] = None) -> T:
    """Return value, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(message, field=field)
    return value


def check_no_none(items: Optional[Iterable[Any]], message: str,
                  field: Optional[str] = None) -> list:
    """
    Materialize items into a list, rejecting a None collection or a None element.

    The whole collection is checked before the caller touches any state.
    """
    if items is None:
        raise InvalidArgumentError(message, field=field)
    if isinstance(items, (str, bytes)):
        raise InvalidArgumentError(
            f"Expected a collection, got a single {type(items).__name__}.",
            field=field
        )

    materialized = list(items)
    if any(item is None for item in materialized):
        raise InvalidArgumentError(message, field=field)
    return materialized


def check_instance(value: Any, types: Union[type, Tuple[type, ...]], message: str,
                   field: Optional[str] = None) -> Any:
    """Return value, or raise InvalidArgumentError if it is not of the given type(s)."""
    if not isinstance(value, types):
        raise InvalidArgumentError(
            f"{message} Got {type(value).__name__}.", field=field
        )
    return value


def check_state(expression: bool, message: str,
                version: Optional[int] = None) -> None:
    """Raise InvalidStateError if expression is false."""
    if not expression:
        raise InvalidStateError(message, version=version)
