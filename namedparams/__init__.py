"""Translate named SQL parameters into positional ones."""

from namedparams import exceptions
from namedparams._typing import Empty, EmptyType
from namedparams.exceptions import ImproperConfigurationError, InvalidArgumentError, NamedParamsError
from namedparams.parameters import (
    ParameterName,
    PlaceholderStyle,
    QueryConfig,
    ScanResult,
    parameter_field,
    scan_query,
)
from namedparams.query import NamedParameterQuery
from namedparams.utils.logging import configure_logging

__all__ = (
    "Empty",
    "EmptyType",
    "ImproperConfigurationError",
    "InvalidArgumentError",
    "NamedParameterQuery",
    "NamedParamsError",
    "ParameterName",
    "PlaceholderStyle",
    "QueryConfig",
    "ScanResult",
    "configure_logging",
    "exceptions",
    "parameter_field",
    "scan_query",
)
