"""Type guard functions for runtime type checking in namedparams.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from types import ModuleType
from typing import TYPE_CHECKING, Any

from msgspec import Struct

from namedparams._typing import ATTRS_INSTALLED, PYDANTIC_INSTALLED, DataclassProtocol

if TYPE_CHECKING:
    from attrs import AttrsInstance
    from pydantic import BaseModel
    from typing_extensions import TypeGuard

__all__ = (
    "has_dict_attribute",
    "is_attrs_instance",
    "is_dataclass_instance",
    "is_mapping",
    "is_msgspec_struct",
    "is_namedtuple_instance",
    "is_pydantic_model",
    "is_record",
    "is_scalar_or_collection",
)


def is_dataclass_instance(obj: Any) -> "TypeGuard[DataclassProtocol]":
    """Check if an object is a dataclass instance.

    Args:
        obj: An object to check.

    Returns:
        True if the object is a dataclass instance.
    """
    # Ensure obj is an instance and not the class itself,
    # and that its type is a dataclass.
    return not isinstance(obj, type) and hasattr(type(obj), "__dataclass_fields__")


def is_attrs_instance(obj: Any) -> "TypeGuard[AttrsInstance]":
    """Check if a value is an attrs class instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not ATTRS_INSTALLED or isinstance(obj, type):
        return False
    import attrs

    return attrs.has(type(obj))


def is_pydantic_model(obj: Any) -> "TypeGuard[BaseModel]":
    """Check if a value is a pydantic model instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    if not PYDANTIC_INSTALLED:
        return False
    from pydantic import BaseModel

    return isinstance(obj, BaseModel)


def is_msgspec_struct(obj: Any) -> "TypeGuard[Struct]":
    """Check if a value is a msgspec struct instance.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Struct)


def is_namedtuple_instance(obj: Any) -> "TypeGuard[tuple[Any, ...]]":
    """Check if a value is an instance of a ``namedtuple`` or ``typing.NamedTuple`` class."""
    return isinstance(obj, tuple) and hasattr(type(obj), "_fields")


def is_mapping(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    """Check if a value is a mapping."""
    return isinstance(obj, Mapping)


def is_scalar_or_collection(obj: Any) -> bool:
    """Check if a value is a string, bytes, mapping, sequence or set.

    Named tuples are sequences too; check them with
    :func:`is_namedtuple_instance` first.
    """
    return isinstance(obj, (str, bytes, bytearray, memoryview, Mapping, Sequence, AbstractSet))


def has_dict_attribute(obj: Any) -> bool:
    """Check if an object carries a ``__dict__`` of instance attributes.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return hasattr(obj, "__dict__") and isinstance(vars(obj), dict)


def is_record(obj: Any) -> bool:
    """Check if a value exposes named fields that can be bound as parameters.

    Classes, modules, callables, mappings, strings, plain sequences and
    primitives are not records.
    """
    if isinstance(obj, (type, ModuleType)):
        return False
    if (
        is_dataclass_instance(obj)
        or is_attrs_instance(obj)
        or is_pydantic_model(obj)
        or is_msgspec_struct(obj)
        or is_namedtuple_instance(obj)
    ):
        return True
    if is_scalar_or_collection(obj) or callable(obj):
        return False
    return has_dict_attribute(obj)
