"""Extraction of named parameter values from record-like objects.

A record is any value exposing named fields: dataclass, attrs, pydantic and
msgspec instances, named tuples, and plain objects with instance attributes.
Each public field is bound under its own name unless the field declares an
explicit parameter name, either through ``Annotated[..., ParameterName("x")]``
or through the field options of the library that defines the record.
"""

import dataclasses
from functools import lru_cache
from typing import Annotated, Any, Optional, get_args, get_origin, get_type_hints

import msgspec

from namedparams.exceptions import InvalidArgumentError
from namedparams.parameters.types import PARAMETER_NAME_KEY, ParameterName
from namedparams.utils.logging import get_logger
from namedparams.utils.type_guards import (
    is_attrs_instance,
    is_dataclass_instance,
    is_msgspec_struct,
    is_namedtuple_instance,
    is_pydantic_model,
    is_record,
)

__all__ = ("extract_record_parameters", "parameter_field")

logger = get_logger("parameters.records")


def parameter_field(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field bound under ``name`` instead of its attribute name.

    Example:
        >>> @dataclass
        ... class Lookup:
        ...     user_id: int = parameter_field("id")

    Args:
        name: Parameter name used in the query.
        **kwargs: Forwarded to :func:`dataclasses.field`.

    Returns:
        A dataclass field carrying the parameter name in its metadata.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[PARAMETER_NAME_KEY] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _is_public_field(name: str) -> bool:
    return not name.startswith("_")


def _declared_name(field_name: str, *overrides: Optional[str]) -> str:
    """First override that is set, empty names included, else the field name."""
    return next((override for override in overrides if override is not None), field_name)


def _marker_name(annotation: Any) -> Optional[str]:
    if get_origin(annotation) is not Annotated:
        return None
    for extra in get_args(annotation)[1:]:
        if isinstance(extra, ParameterName):
            return extra.name
    return None


@lru_cache(maxsize=256)
def _annotated_parameter_names(record_type: type) -> "dict[str, str]":
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.debug("Could not resolve annotations of %s: %s", record_type.__qualname__, exc)
        return {}
    names = {}
    for field_name, annotation in hints.items():
        marker = _marker_name(annotation)
        if marker is not None:
            names[field_name] = marker
    return names


def _dataclass_items(obj: Any, annotated: "dict[str, str]") -> "list[tuple[str, Any]]":
    items = []
    for field in dataclasses.fields(obj):
        if not _is_public_field(field.name):
            continue
        name = _declared_name(field.name, annotated.get(field.name), field.metadata.get(PARAMETER_NAME_KEY))
        items.append((name, getattr(obj, field.name)))
    return items


def _attrs_items(obj: Any, annotated: "dict[str, str]") -> "list[tuple[str, Any]]":
    import attrs

    items = []
    for attribute in attrs.fields(type(obj)):
        if not _is_public_field(attribute.name):
            continue
        name = _declared_name(
            attribute.name, annotated.get(attribute.name), attribute.metadata.get(PARAMETER_NAME_KEY)
        )
        items.append((name, getattr(obj, attribute.name)))
    return items


def _pydantic_items(obj: Any) -> "list[tuple[str, Any]]":
    items = []
    for field_name, field_info in type(obj).model_fields.items():
        if not _is_public_field(field_name):
            continue
        marker = next((extra.name for extra in field_info.metadata if isinstance(extra, ParameterName)), None)
        items.append((_declared_name(field_name, marker, field_info.alias), getattr(obj, field_name)))
    return items


def _msgspec_items(obj: Any, annotated: "dict[str, str]") -> "list[tuple[str, Any]]":
    items = []
    for field in msgspec.structs.fields(obj):
        if not _is_public_field(field.name):
            continue
        items.append((_declared_name(field.encode_name, annotated.get(field.name)), getattr(obj, field.name)))
    return items


def _attribute_items(names: "Any", obj: Any, annotated: "dict[str, str]") -> "list[tuple[str, Any]]":
    return [(annotated.get(name, name), getattr(obj, name)) for name in names if _is_public_field(name)]


def extract_record_parameters(record: Any, sql: Optional[str] = None) -> "list[tuple[str, Any]]":
    """Return ``(parameter_name, value)`` pairs for every public field of ``record``.

    Args:
        record: A record-like value.
        sql: Query text the values are bound to, reported in errors.

    Raises:
        InvalidArgumentError: If ``record`` is not record-shaped.

    Returns:
        Pairs in field declaration order.
    """
    if not is_record(record):
        msg = f"Unable to bind parameters from {type(record).__name__!r}: value is not a record"
        raise InvalidArgumentError(msg, sql=sql)

    if is_pydantic_model(record):
        return _pydantic_items(record)

    annotated = _annotated_parameter_names(type(record))
    if is_dataclass_instance(record):
        return _dataclass_items(record, annotated)
    if is_attrs_instance(record):
        return _attrs_items(record, annotated)
    if is_msgspec_struct(record):
        return _msgspec_items(record, annotated)
    if is_namedtuple_instance(record):
        return _attribute_items(type(record)._fields, record, annotated)  # type: ignore[attr-defined]
    return _attribute_items(list(vars(record)), record, annotated)
