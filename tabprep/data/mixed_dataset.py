"""Dataset container whose cells are either numeric or categorical."""

from collections.abc import Callable, Collection, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from tabprep.errors import InvalidDataError

from .base_dataset import BaseDataset


@dataclass(frozen=True, slots=True)
class Numeric:
    """A numeric cell value."""

    value: float


@dataclass(frozen=True, slots=True)
class Categorical:
    """A categorical cell value (the raw string read from the file)."""

    value: str


MixedDataValue = Numeric | Categorical
"""A single cell of a :class:`MixedDataset`."""


@dataclass(frozen=True)
class MixedDataset(BaseDataset):
    """Row-oriented feature table mixing numeric and categorical columns.

    Which variant of :data:`MixedDataValue` a column holds is decided once at
    ingestion and is the same for every row. Categorical columns are turned
    into numeric indicator columns by :class:`~tabprep.preprocessing.OneHotEncoderFitter`.

    Attributes:
        data: Rows of cell values, every row ``len(data_columns)`` long.
        target: Target value per row.
        data_columns: Feature names, index-aligned with the row cells.
        target_column: Name of the label column excluded from ``data``.
    """

    data: tuple[tuple[MixedDataValue, ...], ...]
    target: tuple[Any, ...]
    data_columns: tuple[str, ...]
    target_column: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(tuple(row) for row in self.data))
        object.__setattr__(self, "target", tuple(self.target))
        object.__setattr__(self, "data_columns", tuple(self.data_columns))
        self._validate_layout()
        self._validate_cells()

    def _validate_cells(self) -> None:
        width = len(self.data_columns)
        kinds: list[type] | None = None
        for row_index, row in enumerate(self.data):
            if len(row) != width:
                raise InvalidDataError(f"Row {row_index} has {len(row)} cells, expected {width}.")
            row_kinds = [type(cell) for cell in row]
            for column, kind in zip(self.data_columns, row_kinds, strict=True):
                if kind not in (Numeric, Categorical):
                    raise InvalidDataError(
                        f"Row {row_index}, column {column!r}: expected Numeric or Categorical, got {kind.__name__}.",
                    )
            if kinds is None:
                kinds = row_kinds
            elif row_kinds != kinds:
                column = next(col for col, a, b in zip(self.data_columns, kinds, row_kinds, strict=True) if a is not b)
                raise InvalidDataError(f"Column {column!r} mixes numeric and categorical values (row {row_index}).")

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        target_column: str,
        *,
        target_type: Callable[[str], Any] = str,
        numeric_columns: Collection[str] = (),
    ) -> "MixedDataset":
        """Load a dataset with numeric and categorical feature columns.

        Args:
            filepath: Path to the CSV file
            target_column: Header name of the label column
            target_type: Callable parsing a raw target cell
            numeric_columns: Header names of the columns to parse as numbers;
                every other feature column is read as categorical text

        Returns:
            MixedDataset with typed cells

        Raises:
            InvalidDataError: If the file is unreadable, the target column is missing,
                a numeric cell cannot be parsed or there are no data rows.
        """
        from .csv_ingest import read_csv_records

        header, rows = read_csv_records(filepath)
        return cls.from_records(
            header,
            rows,
            target_column,
            target_type=target_type,
            numeric_columns=numeric_columns,
        )

    @classmethod
    def from_records(
        cls,
        header: Sequence[str],
        rows: Iterable[Sequence[str]],
        target_column: str,
        *,
        target_type: Callable[[str], Any] = str,
        numeric_columns: Collection[str] = (),
    ) -> "MixedDataset":
        """Build a mixed dataset from a header row and string data rows."""
        from .csv_ingest import build_mixed_dataset

        return build_mixed_dataset(
            header,
            rows,
            target_column,
            numeric_columns=numeric_columns,
            target_type=target_type,
        )

    @property
    def n_rows(self) -> int:
        return len(self.data)

    @property
    def n_cols(self) -> int:
        return len(self.data_columns)

    @property
    def numeric_columns(self) -> list[str]:
        """Names of the columns holding :class:`Numeric` cells (empty without rows)."""
        if not self.data:
            return []
        return [col for col, cell in zip(self.data_columns, self.data[0], strict=True) if isinstance(cell, Numeric)]

    @property
    def categorical_columns(self) -> list[str]:
        """Names of the columns holding :class:`Categorical` cells (empty without rows)."""
        if not self.data:
            return []
        return [
            col for col, cell in zip(self.data_columns, self.data[0], strict=True) if isinstance(cell, Categorical)
        ]

    def to_frame(self) -> pd.DataFrame:
        numeric = set(self.numeric_columns)
        columns = {
            col: pd.Series(
                [row[idx].value for row in self.data],
                dtype="float64" if col in numeric else "object",
            )
            for idx, col in enumerate(self.data_columns)
        }
        frame = pd.DataFrame(columns, index=pd.RangeIndex(self.n_rows))
        frame[self.target_column] = list(self.target)
        return frame
