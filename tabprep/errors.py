"""Error kinds raised throughout the toolkit."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a :class:`PreprocessingError`."""

    INVALID_PARAMETERS = "invalid_parameters"
    """Caller-supplied configuration is structurally invalid."""
    INVALID_DATA = "invalid_data"
    """Input data could not be read or parsed."""
    INVALID_STATE = "invalid_state"
    """Fitted state does not match the input it is applied to."""
    UNTRAINED_MODEL = "untrained_model"
    """An operation requiring fitted state was invoked before ``fit``."""
    LINALG = "linalg"
    """The numeric matrix could not be assembled."""


class PreprocessingError(Exception):
    """Base class for all errors raised by ``tabprep``.

    Attributes:
        kind: The :class:`ErrorKind` describing the failure.
    """

    kind: ErrorKind | None = None

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!s}, message={str(self)!r})"


class InvalidParametersError(PreprocessingError, ValueError):
    kind = ErrorKind.INVALID_PARAMETERS


class InvalidDataError(PreprocessingError, ValueError):
    kind = ErrorKind.INVALID_DATA


class InvalidStateError(PreprocessingError, ValueError):
    kind = ErrorKind.INVALID_STATE


class UntrainedModelError(InvalidStateError):
    kind = ErrorKind.UNTRAINED_MODEL


class LinAlgError(PreprocessingError, ValueError):
    kind = ErrorKind.LINALG


__all__ = [
    "ErrorKind",
    "InvalidDataError",
    "InvalidParametersError",
    "InvalidStateError",
    "LinAlgError",
    "PreprocessingError",
    "UntrainedModelError",
]
