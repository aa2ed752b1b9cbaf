"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd

from tabprep.errors import InvalidDataError


class BaseDataset(ABC):
    """Abstract base class for the dataset containers of the toolkit.

    Concrete datasets are frozen dataclasses holding a feature block (``data``),
    one target value per row (``target``), the feature column names in
    matrix order (``data_columns``) and the name of the excluded label
    column (``target_column``).

    Every dataset upholds:
    - ``len(target) == n_rows``
    - ``len(data_columns) == n_cols`` and the names are distinct
    - ``target_column`` is not one of ``data_columns``

    Datasets are never mutated in place; preprocessors return new instances.
    """

    target: tuple[Any, ...]
    data_columns: tuple[str, ...]
    target_column: str

    @classmethod
    @abstractmethod
    def from_csv(
        cls,
        filepath: str | Path,
        target_column: str,
        *,
        target_type: Callable[[str], Any] = str,
        **kwargs: Any,
    ) -> "BaseDataset":
        """Load a dataset from a CSV file with a header row.

        Args:
            filepath: Path to the CSV file
            target_column: Header name of the label column
            target_type: Callable parsing a raw target cell (e.g. ``str``, ``float``)
            **kwargs: Additional loading parameters

        Returns:
            Dataset instance with loaded data

        Raises:
            InvalidDataError: If the file cannot be read or parsed.
        """
        ...

    @property
    @abstractmethod
    def n_rows(self) -> int:
        """Number of observations."""
        ...

    @property
    @abstractmethod
    def n_cols(self) -> int:
        """Number of feature columns."""
        ...

    @abstractmethod
    def to_frame(self) -> pd.DataFrame:
        """Return features and target as a DataFrame (target as the last column)."""
        ...

    def _validate_layout(self) -> None:
        """Check the invariants shared by all datasets.

        Raises:
            InvalidDataError: If target length, column names and feature block disagree.
        """
        if len(self.target) != self.n_rows:
            raise InvalidDataError(
                f"Target has {len(self.target)} values but the data has {self.n_rows} rows.",
            )
        if len(self.data_columns) != self.n_cols:
            raise InvalidDataError(
                f"{len(self.data_columns)} column names given for {self.n_cols} feature columns.",
            )
        if len(set(self.data_columns)) != len(self.data_columns):
            duplicates = sorted({col for col in self.data_columns if self.data_columns.count(col) > 1})
            raise InvalidDataError(f"Duplicate feature column names: {duplicates}")
        if self.target_column in self.data_columns:
            raise InvalidDataError(f"Target column {self.target_column!r} must not be a feature column.")
