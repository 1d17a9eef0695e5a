"""Single-pass rewriting of named placeholders into positional ones.

The scanner walks the query text once. Outside string literals every
``:name`` occurrence is registered against the next positional slot and
replaced by the placeholder of the requested style. Text between single
quotes is copied unchanged.
"""

import logging
from typing import Final, Union

from mypy_extensions import mypyc_attr

from namedparams.parameters.config import resolve_placeholder_style
from namedparams.parameters.types import PARAMETER_SIGIL, STRING_DELIMITER, PlaceholderStyle, ScanResult
from namedparams.utils.logging import get_logger, log_with_context

__all__ = ("QueryScanner", "get_default_scanner", "scan_query")

logger = get_logger("parameters.scanner")


def _is_identifier_char(character: str) -> bool:
    return character.isalpha() or character.isdecimal()


def _render_placeholder(style: PlaceholderStyle, name: str, ordinal: int) -> str:
    if style is PlaceholderStyle.NAMED_COLON:
        return f"{style.indicator}{name}"
    if style is PlaceholderStyle.NUMERIC:
        return f"{style.indicator}{ordinal}"
    return style.indicator


def _scan(sql: str, style: PlaceholderStyle) -> ScanResult:
    revised: list[str] = []
    positions: dict[str, list[int]] = {}
    slot_index = 0
    length = len(sql)
    i = 0

    while i < length:
        character = sql[i]
        i += 1

        if character == PARAMETER_SIGIL:
            start = i
            while i < length and _is_identifier_char(sql[i]):
                i += 1
            name = sql[start:i]
            positions.setdefault(name, []).append(slot_index)
            slot_index += 1
            revised.append(_render_placeholder(style, name, slot_index))

            if i >= length:
                break
            # the terminator is emitted below but never starts another placeholder
            character = sql[i]
            i += 1

        revised.append(character)

        if character == STRING_DELIMITER:
            while i < length:
                character = sql[i]
                i += 1
                revised.append(character)
                if character == STRING_DELIMITER:
                    break

    return ScanResult(
        revised_query="".join(revised),
        positions={name: tuple(indexes) for name, indexes in positions.items()},
        slot_count=slot_index,
        style=style,
    )


@mypyc_attr(allow_interpreted_subclasses=False)
class QueryScanner:
    """Named placeholder scanner with a bounded result cache.

    Results are read-only, so one :class:`ScanResult` may back any number of
    queries built from the same text and style. The cache and its hit and
    miss counters are not synchronised; concurrent scans may store the same
    result twice or miscount statistics, but never return a wrong result.
    """

    __slots__ = ("_cache", "_hits", "_misses")

    DEFAULT_CACHE_SIZE: Final[int] = 1000

    def __init__(self) -> None:
        self._cache: dict[tuple[str, PlaceholderStyle], ScanResult] = {}
        self._hits = 0
        self._misses = 0

    def scan(
        self, sql: str, style: "Union[PlaceholderStyle, str]" = PlaceholderStyle.QMARK, use_cache: bool = True
    ) -> ScanResult:
        """Rewrite ``sql`` into ``style`` and record where each name occurs.

        Args:
            sql: Query text with ``:name`` placeholders.
            style: Target placeholder style or any selector accepted by
                :func:`~namedparams.parameters.config.resolve_placeholder_style`.
            use_cache: Whether to look up and store the result in the cache.

        Returns:
            The rewritten query, the name to slot index mapping and the slot count.
        """
        placeholder_style = resolve_placeholder_style(style)
        cache_key = (sql, placeholder_style)
        if use_cache:
            cached = self._cache.get(cache_key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        result = _scan(sql, placeholder_style)
        log_with_context(
            logger,
            logging.DEBUG,
            "Scanned named parameter query",
            placeholder_style=placeholder_style.value,
            slot_count=result.slot_count,
            parameter_names=list(result.positions),
        )

        if use_cache and len(self._cache) < self.DEFAULT_CACHE_SIZE:
            self._cache[cache_key] = result

        return result

    def clear_cache(self) -> None:
        """Drop every cached result and reset the statistics."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def cache_info(self) -> "dict[str, int]":
        """Cache statistics: current size, capacity, hits and misses."""
        return {
            "size": len(self._cache),
            "max_size": self.DEFAULT_CACHE_SIZE,
            "hits": self._hits,
            "misses": self._misses,
        }


_default_scanner = QueryScanner()


def get_default_scanner() -> QueryScanner:
    """Return the scanner shared by :func:`scan_query` and named parameter queries."""
    return _default_scanner


def scan_query(sql: str, style: "Union[PlaceholderStyle, str]" = PlaceholderStyle.QMARK) -> ScanResult:
    """Scan ``sql`` with the shared scanner.

    Example:
        >>> result = scan_query(":a :b :a", PlaceholderStyle.NUMERIC)
        >>> result.revised_query
        '$1 $2 $3'
        >>> dict(result.positions)
        {'a': (0, 2), 'b': (1,)}
    """
    return _default_scanner.scan(sql, style)
