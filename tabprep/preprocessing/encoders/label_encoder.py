"""Label encoding of arbitrary hashable values into sequential numeric codes."""

import logging
from collections.abc import Hashable, Iterable, Mapping
from types import MappingProxyType

import numpy as np
from numpy.typing import DTypeLike

from tabprep.errors import InvalidParametersError, InvalidStateError

from ..base import Preprocessor, PreprocessorFitter


logger = logging.getLogger(__name__)


def _max_exact_code(dtype: np.dtype) -> int:
    """Largest code the dtype holds exactly."""
    if np.issubdtype(dtype, np.integer):
        return int(np.iinfo(dtype).max)
    # floats represent every integer up to 2**(mantissa bits + 1)
    return 2 ** (np.finfo(dtype).nmant + 1)


class LabelEncoderFitter(PreprocessorFitter[Iterable[Hashable], "LabelEncoder"]):
    """Assign codes ``0, 1, 2, ...`` to labels in order of first appearance.

    Codes follow insertion order, not sorted order: fitting on
    ``["b", "a", "b", "c"]`` yields ``{"b": 0, "a": 1, "c": 2}``.

    Example:
        >>> from tabprep.data import iris
        >>> ds = iris.load()
        >>> encoder = LabelEncoderFitter().fit(ds.target)
        >>> dict(encoder.fitter.label_map)
        {'Iris-setosa': 0, 'Iris-versicolor': 1, 'Iris-virginica': 2}
        >>> encoder.transform(ds.target)[:3]
        array([0., 0., 0.])

    Attributes:
        dtype: Numeric dtype of the arrays returned by ``transform`` (default: float64). ``fit`` raises
            :class:`~tabprep.errors.InvalidParametersError` when the number of labels exceeds what it holds.
    """

    def __init__(self, dtype: DTypeLike = np.float64) -> None:
        """Initialize the fitter.

        Args:
            dtype: Numeric dtype of the encoded output

        Raises:
            InvalidParametersError: If ``dtype`` is not a numeric numpy dtype.
        """
        super().__init__()
        try:
            self.dtype = np.dtype(dtype)
        except TypeError as exc:
            raise InvalidParametersError(f"Invalid dtype {dtype!r}: {exc}") from exc
        if not np.issubdtype(self.dtype, np.number) or self.dtype.kind == "m":
            raise InvalidParametersError(f"Label codes need a numeric dtype, got {self.dtype}.")
        self._label_map: dict[Hashable, int] = {}

    @property
    def label_map(self) -> Mapping[Hashable, int]:
        """Read-only label -> code mapping in code order (empty before fit)."""
        return MappingProxyType(self._label_map)

    def _fit(self, inputs: Iterable[Hashable]) -> None:
        label_map: dict[Hashable, int] = {}
        for label in inputs:
            if label not in label_map:
                label_map[label] = len(label_map)
        if label_map and len(label_map) - 1 > _max_exact_code(self.dtype):
            raise InvalidParametersError(
                f"{len(label_map)} distinct labels do not fit into codes of dtype {self.dtype}.",
            )
        self._label_map = label_map
        logger.info("Fitted label encoder with %d distinct labels", len(label_map))

    def _make_preprocessor(self) -> "LabelEncoder":
        return LabelEncoder(self)


class LabelEncoder(Preprocessor[Iterable[Hashable], np.ndarray, LabelEncoderFitter]):
    """Map labels to the codes learned by :class:`LabelEncoderFitter`.

    Unseen labels are an error here, unlike the one-hot encoder, which maps
    unseen categories to an all-zero block.
    """

    def __init__(self, fitter: LabelEncoderFitter) -> None:
        super().__init__(fitter)
        self._labels = list(fitter.label_map)

    def transform(self, inputs: Iterable[Hashable]) -> np.ndarray:
        """Encode ``inputs`` element-wise, preserving length and order.

        Raises:
            InvalidStateError: If a label was not seen during fit.
        """
        label_map = self.fitter.label_map
        codes = []
        for label in inputs:
            try:
                codes.append(label_map[label])
            except KeyError as exc:
                raise InvalidStateError(f"Label {label!r} not found in encoder, invalid fitter state.") from exc
        return np.asarray(codes, dtype=self.fitter.dtype)

    def inverse_transform(self, codes: Iterable[float]) -> list[Hashable]:
        """Map codes back to their labels.

        Raises:
            InvalidStateError: If a code is not one produced by this encoder.
        """
        labels = []
        for code in codes:
            try:
                index = int(code)
            except (TypeError, ValueError, OverflowError) as exc:
                raise InvalidStateError(f"Code {code!r} is not an integral label code.") from exc
            if index != code or not 0 <= index < len(self._labels):
                raise InvalidStateError(f"Code {code!r} does not correspond to any fitted label.")
            labels.append(self._labels[index])
        return labels
