"""Tests for placeholder style resolution and query configuration."""

import pytest

from namedparams.exceptions import ImproperConfigurationError
from namedparams.parameters import DIALECT_PLACEHOLDER_STYLES, PlaceholderStyle, QueryConfig, resolve_placeholder_style


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        (PlaceholderStyle.NUMERIC, PlaceholderStyle.NUMERIC),
        ("qmark", PlaceholderStyle.QMARK),
        ("numeric", PlaceholderStyle.NUMERIC),
        ("named_colon", PlaceholderStyle.NAMED_COLON),
        (" Named_Colon ", PlaceholderStyle.NAMED_COLON),
        (":", PlaceholderStyle.NAMED_COLON),
        ("$", PlaceholderStyle.NUMERIC),
        ("?", PlaceholderStyle.QMARK),
        ("postgres", PlaceholderStyle.NUMERIC),
        ("SQLite", PlaceholderStyle.QMARK),
        ("oracle", PlaceholderStyle.NAMED_COLON),
    ],
)
def test_resolve_placeholder_style(selector: str, expected: PlaceholderStyle) -> None:
    assert resolve_placeholder_style(selector) is expected


@pytest.mark.parametrize("selector", ["", "%s", "pyformat", "mssql"])
def test_resolve_unknown_placeholder_style(selector: str) -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown placeholder style"):
        resolve_placeholder_style(selector)


def test_resolve_rejects_non_strings() -> None:
    with pytest.raises(ImproperConfigurationError):
        resolve_placeholder_style(1)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("indicator", "expected"),
    [
        (":", PlaceholderStyle.NAMED_COLON),
        ("$", PlaceholderStyle.NUMERIC),
        ("?", PlaceholderStyle.QMARK),
        ("@", PlaceholderStyle.QMARK),
    ],
)
def test_from_indicator_falls_back_to_qmark(indicator: str, expected: PlaceholderStyle) -> None:
    assert PlaceholderStyle.from_indicator(indicator) is expected


def test_indicator_round_trip() -> None:
    for style in PlaceholderStyle:
        assert PlaceholderStyle.from_indicator(style.indicator) is style


def test_style_str() -> None:
    assert str(PlaceholderStyle.NUMERIC) == "numeric"


def test_every_dialect_maps_to_a_style() -> None:
    assert all(isinstance(style, PlaceholderStyle) for style in DIALECT_PLACEHOLDER_STYLES.values())


def test_query_config_defaults() -> None:
    config = QueryConfig()

    assert config.placeholder_style is PlaceholderStyle.QMARK
    assert config.enable_caching is True


def test_query_config_resolves_selector() -> None:
    assert QueryConfig("$").placeholder_style is PlaceholderStyle.NUMERIC


def test_query_config_replace_and_equality() -> None:
    config = QueryConfig(PlaceholderStyle.NUMERIC)

    clone = config.replace(enable_caching=False)

    assert clone is not config
    assert clone.placeholder_style is PlaceholderStyle.NUMERIC
    assert clone.enable_caching is False
    assert clone != config
    assert clone.replace(enable_caching=True) == config
    assert hash(config) == config.hash()


def test_query_config_replace_rejects_unknown_attributes() -> None:
    with pytest.raises(ImproperConfigurationError, match="dialect"):
        QueryConfig().replace(dialect="sqlite")


def test_query_config_repr() -> None:
    assert repr(QueryConfig()) == "QueryConfig(enable_caching=True, placeholder_style=<PlaceholderStyle.QMARK: 'qmark'>)"
