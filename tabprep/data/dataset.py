"""Homogeneous numeric dataset container."""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from tabprep.errors import InvalidDataError, LinAlgError

from .base_dataset import BaseDataset


@dataclass(frozen=True, eq=False)
class Dataset(BaseDataset):
    """Numeric feature matrix plus one target value per row.

    The feature matrix is copied to ``float64`` on construction and marked
    read-only, so a ``Dataset`` behaves as an immutable value.

    Example:
        >>> ds = Dataset(
        ...     data=[[1.0, 2.0], [3.0, 4.0]],
        ...     target=["a", "b"],
        ...     data_columns=["feature_1", "feature_2"],
        ...     target_column="label",
        ... )
        >>> ds.n_rows, ds.n_cols
        (2, 2)

    Attributes:
        data: Read-only ``(n_rows, n_cols)`` float64 matrix.
        target: Target value per row.
        data_columns: Feature names, index-aligned with the matrix columns.
        target_column: Name of the label column excluded from ``data``.
    """

    data: np.ndarray
    target: tuple[Any, ...]
    data_columns: tuple[str, ...]
    target_column: str

    def __post_init__(self) -> None:
        try:
            data = np.array(self.data, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidDataError(f"Feature data is not a numeric matrix: {exc}") from exc
        if data.ndim != 2:
            raise InvalidDataError(f"Feature data must be two-dimensional, got {data.ndim} dimension(s).")
        data.setflags(write=False)
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "target", tuple(self.target))
        object.__setattr__(self, "data_columns", tuple(self.data_columns))
        self._validate_layout()

    @classmethod
    def from_flat(
        cls,
        rows: int,
        cols: int,
        values: Sequence[float] | np.ndarray,
        target: Iterable[Any],
        data_columns: Iterable[str],
        target_column: str,
    ) -> "Dataset":
        """Build a dataset from a flat row-major value buffer.

        Raises:
            LinAlgError: If ``values`` does not hold exactly ``rows * cols`` elements.
        """
        flat = np.asarray(values, dtype=np.float64).ravel()
        if rows < 0 or cols < 0 or flat.size != rows * cols:
            raise LinAlgError(f"Cannot shape {flat.size} values into a {rows}x{cols} matrix.")
        return cls(
            data=flat.reshape(rows, cols),
            target=tuple(target),
            data_columns=tuple(data_columns),
            target_column=target_column,
        )

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        target_column: str,
        *,
        target_type: Callable[[str], Any] = str,
    ) -> "Dataset":
        """Load a dataset whose feature columns are all numeric.

        Args:
            filepath: Path to the CSV file
            target_column: Header name of the label column
            target_type: Callable parsing a raw target cell. Label encoding of
                string targets is left to :class:`~tabprep.preprocessing.LabelEncoderFitter`.

        Returns:
            Dataset with every non-target column parsed as float

        Raises:
            InvalidDataError: If the file is unreadable, the target column is missing,
                a cell cannot be parsed or there are no data rows.
        """
        from .csv_ingest import read_csv_records

        header, rows = read_csv_records(filepath)
        return cls.from_records(header, rows, target_column, target_type=target_type)

    @classmethod
    def from_records(
        cls,
        header: Sequence[str],
        rows: Iterable[Sequence[str]],
        target_column: str,
        *,
        target_type: Callable[[str], Any] = str,
    ) -> "Dataset":
        """Build a dataset from a header row and string data rows."""
        from .csv_ingest import build_dataset

        return build_dataset(header, rows, target_column, target_type=target_type)

    @property
    def n_rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self.data.shape[1])

    def row_iter(self) -> Iterator[np.ndarray]:
        """Iterate over the feature rows as read-only 1-D arrays."""
        yield from self.data

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(self.data.copy(), columns=list(self.data_columns))
        frame[self.target_column] = list(self.target)
        return frame

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return (
            self.data_columns == other.data_columns
            and self.target_column == other.target_column
            and self.target == other.target
            and np.array_equal(self.data, other.data)
        )
