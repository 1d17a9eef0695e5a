"""Named parameter queries.

:class:`NamedParameterQuery` rewrites a query that uses ``:name`` placeholders
into the positional placeholder style of a driver and keeps one value slot per
placeholder. Values are bound by name and read back in positional order::

    query = NamedParameterQuery("SELECT * FROM users WHERE id = :id AND org = :org", "$")
    query.set_values_from_mapping({"id": 1, "org": "acme"})
    await connection.fetch(query.revised_query, *query.parameters)

A query object is reused across executions by binding again. It is not
thread-safe: one bind-then-read sequence must complete before another starts.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from namedparams._typing import Empty
from namedparams.parameters.config import QueryConfig, resolve_placeholder_style
from namedparams.parameters.records import extract_record_parameters
from namedparams.parameters.scanner import get_default_scanner
from namedparams.parameters.types import PlaceholderStyle, ScanResult
from namedparams.utils.logging import get_logger, log_with_context
from namedparams.utils.type_guards import is_mapping

__all__ = ("NamedParameterQuery",)

logger = get_logger("query")


class NamedParameterQuery:
    """Translate named parameters into positional parameters for one SQL statement.

    Args:
        sql: Query text containing ``:name`` placeholders.
        placeholder_style: Placeholder style of the rewritten query, or any
            selector accepted by
            :func:`~namedparams.parameters.config.resolve_placeholder_style`.
            Defaults to the style of ``config``.
        config: Query configuration. Defaults to :class:`QueryConfig`.
    """

    __slots__ = ("_config", "_original_query", "_parameters", "_scan")

    def __init__(
        self,
        sql: str,
        placeholder_style: "Optional[Union[PlaceholderStyle, str]]" = None,
        config: "Optional[QueryConfig]" = None,
    ) -> None:
        config = config or QueryConfig()
        if placeholder_style is not None:
            style = resolve_placeholder_style(placeholder_style)
            if style is not config.placeholder_style:
                config = config.replace(placeholder_style=style)
        self._config = config
        self._original_query = sql
        self._scan: ScanResult = get_default_scanner().scan(
            sql, config.placeholder_style, use_cache=config.enable_caching
        )
        self._parameters: list[Any] = [Empty] * self._scan.slot_count

    @property
    def original_query(self) -> str:
        """The query text as passed in."""
        return self._original_query

    @property
    def revised_query(self) -> str:
        """The query text with named placeholders replaced by positional ones."""
        return self._scan.revised_query

    @property
    def parameters(self) -> "list[Any]":
        """Bound values in positional order.

        The list is returned by reference and changes with every later bind.
        Slots that were never bound hold :data:`~namedparams._typing.Empty`.
        """
        return self._parameters

    @property
    def positions(self) -> "dict[str, tuple[int, ...]]":
        """Copy of the mapping from parameter name to its slot indexes."""
        return dict(self._scan.positions)

    @property
    def parameter_names(self) -> "tuple[str, ...]":
        return self._scan.parameter_names

    @property
    def slot_count(self) -> int:
        return self._scan.slot_count

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        return self._config.placeholder_style

    @property
    def config(self) -> QueryConfig:
        return self._config

    def set_value(self, name: str, value: Any) -> None:
        """Bind ``value`` to every occurrence of ``name``.

        Names that do not occur in the query are ignored, so optional
        parameters can be bound unconditionally.
        """
        indexes = self._scan.positions.get(name)
        if indexes is None:
            log_with_context(logger, logging.DEBUG, "Ignoring unknown parameter", parameter_name=name)
            return
        for index in indexes:
            self._parameters[index] = value

    def set_values_from_mapping(self, values: "Mapping[str, Any]") -> None:
        """Bind every key of ``values`` as a parameter name. Unknown keys are ignored."""
        for name, value in values.items():
            self.set_value(name, value)

    def set_values_from_record(self, record: Any) -> None:
        """Bind every public field of a record-like value.

        Fields are bound under their own name unless they declare another one
        with :class:`~namedparams.parameters.types.ParameterName`, dataclass or
        attrs ``metadata={"parameter_name": ...}``, a pydantic alias or a
        msgspec rename.

        Raises:
            InvalidArgumentError: If ``record`` is not a record-shaped value.
        """
        for name, value in extract_record_parameters(record, sql=self._original_query):
            self.set_value(name, value)

    def bind(self, *sources: Any, **values: Any) -> "NamedParameterQuery":
        """Bind mappings, records and keyword values in order, returning the query.

        Later sources overwrite earlier ones for the names they share.
        """
        for source in sources:
            if is_mapping(source):
                self.set_values_from_mapping(source)
            else:
                self.set_values_from_record(source)
        if values:
            self.set_values_from_mapping(values)
        return self

    def missing_parameters(self) -> "list[str]":
        """Names with at least one slot that has not been bound yet."""
        return [
            name
            for name, indexes in self._scan.positions.items()
            if any(self._parameters[index] is Empty for index in indexes)
        ]

    def reset(self) -> None:
        """Return every slot to the unbound state."""
        for index in range(len(self._parameters)):
            self._parameters[index] = Empty

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(revised_query={self.revised_query!r}, "
            f"placeholder_style={self.placeholder_style!r}, parameters={self._parameters!r})"
        )
