"""Preprocessing module: fit/transform protocol, encoders and scalers."""

from .base import FitStatus, Preprocessor, PreprocessorFitter
from .encoders import LabelEncoder, LabelEncoderFitter, OneHotEncoder, OneHotEncoderFitter
from .scalers import MinMaxFitter, MinMaxScaler


__all__ = [
    "FitStatus",
    "LabelEncoder",
    "LabelEncoderFitter",
    "MinMaxFitter",
    "MinMaxScaler",
    "OneHotEncoder",
    "OneHotEncoderFitter",
    "Preprocessor",
    "PreprocessorFitter",
]
