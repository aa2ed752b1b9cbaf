"""Data module for dataset containers and CSV ingestion."""

from . import iris
from .base_dataset import BaseDataset
from .csv_ingest import build_dataset, build_mixed_dataset, read_csv_records
from .dataset import Dataset
from .mixed_dataset import Categorical, MixedDataset, MixedDataValue, Numeric


__all__ = [
    "BaseDataset",
    "Categorical",
    "Dataset",
    "MixedDataValue",
    "MixedDataset",
    "Numeric",
    "build_dataset",
    "build_mixed_dataset",
    "iris",
    "read_csv_records",
]
