"""Scalers rescaling numeric features."""

from .min_max_scaler import MinMaxFitter, MinMaxScaler


__all__ = ["MinMaxFitter", "MinMaxScaler"]
