"""Encoders turning labels and categories into numbers."""

from .label_encoder import LabelEncoder, LabelEncoderFitter
from .one_hot_encoder import OneHotEncoder, OneHotEncoderFitter


__all__ = ["LabelEncoder", "LabelEncoderFitter", "OneHotEncoder", "OneHotEncoderFitter"]
