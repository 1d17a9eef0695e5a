"""Sentinels and optional dependency flags."""

from enum import Enum
from importlib.util import find_spec
from typing import Any, ClassVar, Final, Literal, Protocol

from typing_extensions import TypeAlias

__all__ = (
    "ATTRS_INSTALLED",
    "PYDANTIC_INSTALLED",
    "DataclassProtocol",
    "Empty",
    "EmptyEnum",
    "EmptyType",
)


def _module_installed(name: str) -> bool:
    return find_spec(name) is not None


PYDANTIC_INSTALLED: Final[bool] = _module_installed("pydantic")
ATTRS_INSTALLED: Final[bool] = _module_installed("attrs")


class DataclassProtocol(Protocol):
    """Protocol for instance checking dataclasses"""

    __dataclass_fields__: "ClassVar[dict[str, Any]]"


class EmptyEnum(Enum):
    """A sentinel enum used as placeholder."""

    EMPTY = 0

    def __repr__(self) -> str:
        return "Empty"


EmptyType: TypeAlias = Literal[EmptyEnum.EMPTY]
Empty: Final = EmptyEnum.EMPTY
