"""Placeholder style configuration."""

from typing import Any, Final, Union

from namedparams.exceptions import ImproperConfigurationError
from namedparams.parameters.types import PlaceholderStyle

__all__ = ("DIALECT_PLACEHOLDER_STYLES", "QueryConfig", "resolve_placeholder_style")


DIALECT_PLACEHOLDER_STYLES: Final[dict[str, PlaceholderStyle]] = {
    "asyncpg": PlaceholderStyle.NUMERIC,
    "bigquery": PlaceholderStyle.NAMED_COLON,
    "duckdb": PlaceholderStyle.QMARK,
    "mysql": PlaceholderStyle.QMARK,
    "oracle": PlaceholderStyle.NAMED_COLON,
    "postgres": PlaceholderStyle.NUMERIC,
    "postgresql": PlaceholderStyle.NUMERIC,
    "spanner": PlaceholderStyle.NAMED_COLON,
    "sqlite": PlaceholderStyle.QMARK,
}


def resolve_placeholder_style(value: "Union[PlaceholderStyle, str]") -> PlaceholderStyle:
    """Resolve a placeholder style selector.

    Args:
        value: A :class:`PlaceholderStyle`, a style value such as ``"qmark"``,
            an indicator character (``":"``, ``"$"`` or ``"?"``), or a dialect
            name listed in :data:`DIALECT_PLACEHOLDER_STYLES`.

    Raises:
        ImproperConfigurationError: If the selector matches none of the above.

    Returns:
        The resolved style.
    """
    if isinstance(value, PlaceholderStyle):
        return value
    if not isinstance(value, str):
        msg = f"Placeholder style must be a string or PlaceholderStyle, got {type(value).__name__}"
        raise ImproperConfigurationError(msg)
    if value in {":", "$", "?"}:
        return PlaceholderStyle.from_indicator(value)
    normalized = value.strip().lower()
    try:
        return PlaceholderStyle(normalized)
    except ValueError:
        pass
    if normalized in DIALECT_PLACEHOLDER_STYLES:
        return DIALECT_PLACEHOLDER_STYLES[normalized]
    msg = f"Unknown placeholder style {value!r}"
    raise ImproperConfigurationError(msg)


class QueryConfig:
    """Configuration shared by the named parameter queries built from it."""

    __slots__ = ("enable_caching", "placeholder_style")

    def __init__(
        self,
        placeholder_style: "Union[PlaceholderStyle, str]" = PlaceholderStyle.QMARK,
        enable_caching: bool = True,
    ) -> None:
        """Initialize query configuration.

        Args:
            placeholder_style: Placeholder style of the rewritten query, or any
                selector accepted by :func:`resolve_placeholder_style`
            enable_caching: Whether scan results are shared through the scanner cache
        """
        self.placeholder_style = resolve_placeholder_style(placeholder_style)
        self.enable_caching = enable_caching

    def replace(self, **kwargs: Any) -> "QueryConfig":
        """Return a copy with the given attributes replaced."""
        current = {"placeholder_style": self.placeholder_style, "enable_caching": self.enable_caching}
        unknown = set(kwargs) - set(current)
        if unknown:
            msg = f"Unknown QueryConfig attributes: {', '.join(sorted(unknown))}"
            raise ImproperConfigurationError(msg)
        current.update(kwargs)
        return type(self)(**current)

    def hash(self) -> int:
        """Generate hash for cache key generation."""
        return hash((self.placeholder_style.value, self.enable_caching))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.placeholder_style == other.placeholder_style and self.enable_caching == other.enable_caching

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(enable_caching={self.enable_caching!r}, placeholder_style={self.placeholder_style!r})"
