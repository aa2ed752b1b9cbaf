"""CSV ingestion into :class:`Dataset` and :class:`MixedDataset` containers.

Reading is delegated to :func:`pandas.read_csv`, configured to hand back every
cell as the raw string from the file. Typing of the cells happens here, so
parse failures surface as :class:`~tabprep.errors.InvalidDataError` with the
offending column named.
"""

import logging
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from tabprep.errors import InvalidDataError

from .dataset import Dataset
from .mixed_dataset import Categorical, MixedDataset, MixedDataValue, Numeric


__all__ = ["build_dataset", "build_mixed_dataset", "read_csv_records"]

logger = logging.getLogger(__name__)


def read_csv_records(filepath: str | Path) -> tuple[list[str], Iterator[tuple[str, ...]]]:
    """Read a CSV file into its header row and an iterator over string rows.

    The header is read as an ordinary row, so duplicate names are kept as
    written and every data row must have exactly as many fields as the header.

    Args:
        filepath: Path to a CSV file with a header row

    Returns:
        Tuple of the header names and an iterator yielding one tuple of cells per data row

    Raises:
        InvalidDataError: If the file cannot be opened or tokenized, or a row's width differs from the header.
    """
    csv_path = Path(filepath)
    try:
        # rows longer than the first line raise ParserError
        frame = pd.read_csv(
            csv_path,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
            engine="python",
        )
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidDataError(f"Failed to read CSV file {csv_path}: {exc}") from exc
    if not isinstance(frame.index, pd.RangeIndex):
        raise InvalidDataError(f"Failed to read CSV file {csv_path}: data rows have more fields than the header.")

    header = [str(name) for name in frame.iloc[0]]
    body = frame.iloc[1:]
    # without NA inference only the padding of short rows is missing
    short_rows = np.flatnonzero(body.isna().any(axis=1).to_numpy())
    if short_rows.size:
        raise InvalidDataError(
            f"Row {short_rows[0]} of {csv_path} has fewer fields than the header ({len(header)}).",
        )
    logger.debug("Read %d rows x %d columns from %s", len(body), len(header), csv_path)
    return header, body.itertuples(index=False, name=None)


def build_dataset(
    header: Sequence[str],
    rows: Iterable[Sequence[str]],
    target_column: str,
    *,
    target_type: Callable[[str], Any] = str,
) -> Dataset:
    """Parse string rows into a :class:`Dataset` with all-numeric features.

    Args:
        header: Column names in file order
        rows: Data rows, each with one string cell per header column
        target_column: Name of the label column
        target_type: Callable parsing a raw target cell

    Returns:
        Dataset whose ``data_columns`` is ``header`` without ``target_column``

    Raises:
        InvalidDataError: On a missing target column, ragged or unparsable rows, or no rows at all.
    """
    header = [str(name) for name in header]
    target_index = _target_index(header, target_column)
    records = _collect_rows(rows, header)
    data_columns = [name for idx, name in enumerate(header) if idx != target_index]

    data = np.empty((len(records), len(data_columns)), dtype=np.float64)
    target = []
    for row_index, record in enumerate(records):
        col_index = 0
        for cell_index, cell in enumerate(record):
            if cell_index == target_index:
                target.append(_parse_target(cell, target_type, target_column, row_index))
            else:
                data[row_index, col_index] = _parse_number(cell, header[cell_index], row_index)
                col_index += 1

    logger.debug("Built dataset with %d rows and %d features", data.shape[0], data.shape[1])
    return Dataset(data=data, target=tuple(target), data_columns=tuple(data_columns), target_column=target_column)


def build_mixed_dataset(
    header: Sequence[str],
    rows: Iterable[Sequence[str]],
    target_column: str,
    *,
    numeric_columns: Collection[str] = (),
    target_type: Callable[[str], Any] = str,
) -> MixedDataset:
    """Parse string rows into a :class:`MixedDataset`.

    A feature column is numeric iff its name is listed in ``numeric_columns``;
    the cell contents are never inspected to guess a type.

    Args:
        header: Column names in file order
        rows: Data rows, each with one string cell per header column
        target_column: Name of the label column
        numeric_columns: Names of the columns to parse as numbers
        target_type: Callable parsing a raw target cell

    Returns:
        MixedDataset whose ``data_columns`` is ``header`` without ``target_column``

    Raises:
        InvalidDataError: On a missing target column, ragged rows, unparsable numeric cells or no rows at all.
    """
    header = [str(name) for name in header]
    target_index = _target_index(header, target_column)
    numeric = set(numeric_columns)
    if unknown := sorted(numeric.difference(header)):
        logger.warning("Ignoring numeric column names not present in the header: %s", ", ".join(unknown))
    records = _collect_rows(rows, header)
    data_columns = [name for idx, name in enumerate(header) if idx != target_index]

    data: list[tuple[MixedDataValue, ...]] = []
    target = []
    for row_index, record in enumerate(records):
        cells: list[MixedDataValue] = []
        for cell_index, cell in enumerate(record):
            column = header[cell_index]
            if cell_index == target_index:
                target.append(_parse_target(cell, target_type, target_column, row_index))
            elif column in numeric:
                cells.append(Numeric(_parse_number(cell, column, row_index)))
            else:
                cells.append(Categorical(cell))
        data.append(tuple(cells))

    logger.debug(
        "Built mixed dataset with %d rows, %d numeric and %d categorical features",
        len(data),
        sum(col in numeric for col in data_columns),
        sum(col not in numeric for col in data_columns),
    )
    return MixedDataset(
        data=tuple(data),
        target=tuple(target),
        data_columns=tuple(data_columns),
        target_column=target_column,
    )


def _target_index(header: list[str], target_column: str) -> int:
    try:
        return header.index(target_column)
    except ValueError as exc:
        raise InvalidDataError(f"Target column {target_column!r} not found in CSV header {header}.") from exc


def _collect_rows(rows: Iterable[Sequence[str]], header: list[str]) -> list[Sequence[str]]:
    """Materialize the rows so the matrix can be sized before parsing."""
    records = list(rows)
    if not records:
        raise InvalidDataError("CSV input contains no data rows.")
    for row_index, record in enumerate(records):
        if len(record) != len(header):
            raise InvalidDataError(f"Row {row_index} has {len(record)} fields, the header has {len(header)}.")
    return records


def _parse_number(cell: str, column: str, row_index: int) -> float:
    try:
        return float(cell)
    except (TypeError, ValueError) as exc:
        raise InvalidDataError(
            f"Failed to parse value {cell!r} in column {column!r} (row {row_index}) as a number.",
        ) from exc


def _parse_target(cell: str, target_type: Callable[[str], Any], column: str, row_index: int) -> Any:
    try:
        return target_type(cell)
    except (TypeError, ValueError) as exc:
        raise InvalidDataError(f"Failed to parse target value {cell!r} in column {column!r} (row {row_index}).") from exc
