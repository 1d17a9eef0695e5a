"""Named placeholder scanning and parameter sources."""

from namedparams.parameters.config import DIALECT_PLACEHOLDER_STYLES, QueryConfig, resolve_placeholder_style
from namedparams.parameters.records import extract_record_parameters, parameter_field
from namedparams.parameters.scanner import QueryScanner, get_default_scanner, scan_query
from namedparams.parameters.types import PARAMETER_NAME_KEY, ParameterName, PlaceholderStyle, ScanResult

__all__ = (
    "DIALECT_PLACEHOLDER_STYLES",
    "PARAMETER_NAME_KEY",
    "ParameterName",
    "PlaceholderStyle",
    "QueryConfig",
    "QueryScanner",
    "ScanResult",
    "extract_record_parameters",
    "get_default_scanner",
    "parameter_field",
    "resolve_placeholder_style",
    "scan_query",
)
