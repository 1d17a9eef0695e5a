"""Core parameter types used throughout namedparams."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

__all__ = (
    "PARAMETER_NAME_KEY",
    "PARAMETER_SIGIL",
    "STRING_DELIMITER",
    "ParameterName",
    "PlaceholderStyle",
    "ScanResult",
)

PARAMETER_SIGIL: Final[str] = ":"
STRING_DELIMITER: Final[str] = "'"
PARAMETER_NAME_KEY: Final[str] = "parameter_name"


class PlaceholderStyle(str, Enum):
    """Positional placeholder syntax written into the rewritten query."""

    QMARK = "qmark"
    NUMERIC = "numeric"
    NAMED_COLON = "named_colon"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value

    @property
    def indicator(self) -> str:
        """Single character that introduces a placeholder in this style."""
        return _INDICATORS[self]

    @classmethod
    def from_indicator(cls, indicator: str) -> "PlaceholderStyle":
        """Map a placeholder indicator character to a style.

        ``":"`` keeps named placeholders, ``"$"`` numbers them and anything
        else falls back to ``"?"``.
        """
        if indicator == ":":
            return cls.NAMED_COLON
        if indicator == "$":
            return cls.NUMERIC
        return cls.QMARK


_INDICATORS: Final[dict[PlaceholderStyle, str]] = {
    PlaceholderStyle.QMARK: "?",
    PlaceholderStyle.NUMERIC: "$",
    PlaceholderStyle.NAMED_COLON: ":",
}


class ParameterName:
    """Marker overriding the parameter name bound from a record field.

    Used inside ``typing.Annotated``::

        @dataclass
        class Lookup:
            user_id: Annotated[int, ParameterName("id")]
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ScanResult:
    """Read-only output of a single scan over query text.

    ``positions`` is a read-only mapping, so a cached result can back any
    number of queries without one of them altering the others.
    """

    __slots__ = ("_positions", "_revised_query", "_slot_count", "_style")

    def __init__(
        self, revised_query: str, positions: "Mapping[str, tuple[int, ...]]", slot_count: int, style: PlaceholderStyle
    ) -> None:
        self._revised_query = revised_query
        self._positions: "Mapping[str, tuple[int, ...]]" = MappingProxyType(dict(positions))
        self._slot_count = slot_count
        self._style = style

    @property
    def revised_query(self) -> str:
        return self._revised_query

    @property
    def positions(self) -> "Mapping[str, tuple[int, ...]]":
        """Parameter name to slot indexes, in order of first occurrence."""
        return self._positions

    @property
    def slot_count(self) -> int:
        return self._slot_count

    @property
    def style(self) -> PlaceholderStyle:
        return self._style

    @property
    def parameter_names(self) -> "tuple[str, ...]":
        """Distinct parameter names in order of first occurrence."""
        return tuple(self._positions)

    def __eq__(self, other: object) -> bool:
        """Equality comparison compatible with dataclass.__eq__."""
        if not isinstance(other, type(self)):
            return False
        return (
            self._revised_query == other._revised_query
            and dict(self._positions) == dict(other._positions)
            and self._slot_count == other._slot_count
            and self._style == other._style
        )

    def __hash__(self) -> int:
        return hash((self._revised_query, tuple(self._positions.items()), self._slot_count, self._style))

    def __repr__(self) -> str:
        """String representation compatible with dataclass.__repr__."""
        return f"{type(self).__name__}({', '.join([f'positions={dict(self._positions)!r}', f'revised_query={self._revised_query!r}', f'slot_count={self._slot_count!r}', f'style={self._style!r}'])})"
