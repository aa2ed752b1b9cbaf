from .data import Categorical, Dataset, MixedDataset, MixedDataValue, Numeric
from .errors import (
    ErrorKind,
    InvalidDataError,
    InvalidParametersError,
    InvalidStateError,
    LinAlgError,
    PreprocessingError,
    UntrainedModelError,
)
from .preprocessing import (
    FitStatus,
    LabelEncoderFitter,
    MinMaxFitter,
    OneHotEncoderFitter,
)


__all__ = [
    "Categorical",
    "Dataset",
    "ErrorKind",
    "FitStatus",
    "InvalidDataError",
    "InvalidParametersError",
    "InvalidStateError",
    "LabelEncoderFitter",
    "LinAlgError",
    "MinMaxFitter",
    "MixedDataValue",
    "MixedDataset",
    "Numeric",
    "OneHotEncoderFitter",
    "PreprocessingError",
    "UntrainedModelError",
]
