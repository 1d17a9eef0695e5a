from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "InvalidArgumentError",
    "NamedParamsError",
    "ParameterError",
)


class NamedParamsError(Exception):
    """Base exception class from which all namedparams exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``NamedParamsError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(NamedParamsError):
    """Improper Configuration error.

    Raised when a placeholder style selector cannot be resolved.
    """


class ParameterError(NamedParamsError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class InvalidArgumentError(ParameterError, TypeError):
    """Raised when a value that is not record-shaped is used as a parameter source."""
