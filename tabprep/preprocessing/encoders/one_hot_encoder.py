"""One-hot encoding of the categorical columns of a :class:`MixedDataset`."""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

import numpy as np

from tabprep.data.dataset import Dataset
from tabprep.data.mixed_dataset import Categorical, MixedDataset, Numeric
from tabprep.errors import InvalidStateError

from ..base import Preprocessor, PreprocessorFitter


logger = logging.getLogger(__name__)


class OneHotEncoderFitter(PreprocessorFitter[MixedDataset, "OneHotEncoder"]):
    """Learn the categories of every categorical column.

    Each column with at least one :class:`Categorical` cell gets a category map
    assigning indices ``0, 1, 2, ...`` in order of first appearance while
    scanning the rows top to bottom. Purely numeric columns get no map and
    pass through the transform unchanged.

    Example:
        >>> ds = MixedDataset.from_csv("pokemon.csv", "Legendary", numeric_columns=["#", "Total", "HP", "Attack"])
        >>> encoder = OneHotEncoderFitter().fit(ds)
        >>> encoded = encoder.transform(ds)  # homogeneous Dataset
        >>> encoded.data_columns[:3]  # "Name" is categorical and expands in place
        ('#', 'Name_Bulbasaur', 'Name_Ivysaur')
    """

    def __init__(self) -> None:
        super().__init__()
        self._category_map: dict[str, dict[str, int]] = {}

    @property
    def category_map(self) -> Mapping[str, Mapping[str, int]]:
        """Read-only column -> (category -> index) mapping (empty before fit)."""
        return MappingProxyType({column: MappingProxyType(cats) for column, cats in self._category_map.items()})

    def _fit(self, inputs: MixedDataset) -> None:
        category_map: dict[str, dict[str, int]] = {}
        for col_index, column in enumerate(inputs.data_columns):
            categories: dict[str, int] = {}
            for row in inputs.data:
                match row[col_index]:
                    case Categorical(value) if value not in categories:
                        categories[value] = len(categories)
            if categories:
                category_map[column] = categories
        self._category_map = category_map
        logger.info(
            "Fitted one-hot encoder on %d categorical columns (%d categories)",
            len(category_map),
            sum(len(cats) for cats in category_map.values()),
        )

    def _make_preprocessor(self) -> "OneHotEncoder":
        return OneHotEncoder(self)


class OneHotEncoder(Preprocessor[MixedDataset, Dataset, OneHotEncoderFitter]):
    """Expand categorical columns into indicator blocks.

    Every fitted categorical column becomes ``len(categories)`` columns named
    ``"<column>_<category>"`` in index order; numeric columns keep their name
    and value. A category not seen during fit encodes as an all-zero block.
    """

    def output_columns(self, data_columns: Sequence[str]) -> tuple[str, ...]:
        """Names of the encoded columns for an input with ``data_columns``."""
        category_map = self.fitter.category_map
        names: list[str] = []
        for column in data_columns:
            if (categories := category_map.get(column)) is not None:
                names.extend(f"{column}_{category}" for category in categories)
            else:
                names.append(column)
        return tuple(names)

    def transform(self, inputs: MixedDataset) -> Dataset:
        """Encode ``inputs`` into a numeric :class:`Dataset`.

        Raises:
            InvalidStateError: If a cell's type disagrees with the fitted encoding of its
                column, or the encoded column names collide.
        """
        category_map = self.fitter.category_map
        columns = self.output_columns(inputs.data_columns)
        if len(set(columns)) != len(columns):
            raise InvalidStateError(f"Encoded column names are not unique: {columns}")

        data = np.zeros((inputs.n_rows, len(columns)), dtype=np.float64)
        n_unseen = 0
        for row_index, row in enumerate(inputs.data):
            offset = 0
            for column, cell in zip(inputs.data_columns, row, strict=True):
                categories = category_map.get(column)
                match cell:
                    case Categorical(value) if categories is not None:
                        if (index := categories.get(value)) is not None:
                            data[row_index, offset + index] = 1.0
                        else:
                            n_unseen += 1
                        offset += len(categories)
                    case Numeric(value) if categories is None:
                        data[row_index, offset] = value
                        offset += 1
                    case _:
                        raise InvalidStateError(
                            f"Row {row_index}: {cell!r} in column {column!r} does not match the fitted encoding.",
                        )

        if n_unseen:
            logger.debug("Encoded %d unseen categories as all-zero blocks", n_unseen)
        return Dataset(
            data=data,
            target=inputs.target,
            data_columns=columns,
            target_column=inputs.target_column,
        )
