import pytest

from namedparams.exceptions import ImproperConfigurationError, InvalidArgumentError, NamedParamsError, ParameterError


def test_exception_hierarchy() -> None:
    """Test exception classes inherit correctly."""
    assert issubclass(ImproperConfigurationError, NamedParamsError)
    assert issubclass(ParameterError, NamedParamsError)
    assert issubclass(InvalidArgumentError, ParameterError)
    assert issubclass(InvalidArgumentError, TypeError)


def test_exception_instantiation() -> None:
    """Test exceptions can be instantiated with messages."""
    exc = ImproperConfigurationError("Unknown placeholder style 'x'")
    assert str(exc) == "Unknown placeholder style 'x'"
    assert exc.detail == "Unknown placeholder style 'x'"
    assert repr(exc) == "ImproperConfigurationError - Unknown placeholder style 'x'"


def test_detail_keyword_and_extra_args() -> None:
    exc = NamedParamsError("first", "second", detail="details")
    assert exc.args == ("first", "second")
    assert str(exc) == "first second details"


def test_empty_exception_repr() -> None:
    assert repr(NamedParamsError()) == "NamedParamsError"
    assert str(NamedParamsError()) == ""


def test_parameter_error_includes_sql() -> None:
    exc = ParameterError("bad record", sql="SELECT :a")
    assert exc.sql == "SELECT :a"
    assert str(exc) == "bad record\nSQL: SELECT :a"


def test_invalid_argument_error_is_catchable_as_type_error() -> None:
    with pytest.raises(TypeError, match="not a record"):
        raise InvalidArgumentError("value is not a record")


def test_exception_chaining() -> None:
    """Test exceptions support chaining with 'from'."""
    try:
        try:
            raise ValueError("Original error")
        except ValueError as e:
            raise ImproperConfigurationError("Mapped error") from e
    except ImproperConfigurationError as exc:
        assert exc.__cause__ is not None
        assert isinstance(exc.__cause__, ValueError)
