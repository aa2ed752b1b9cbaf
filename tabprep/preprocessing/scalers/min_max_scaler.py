"""Per-feature affine rescaling into a fixed range."""

import logging

import numpy as np

from tabprep.data.dataset import Dataset
from tabprep.errors import InvalidStateError

from ..base import Preprocessor, PreprocessorFitter


logger = logging.getLogger(__name__)


def _readonly(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


class MinMaxFitter(PreprocessorFitter[Dataset, "MinMaxScaler"]):
    r"""Learn per-feature coefficients mapping ``[min, max]`` onto ``[scaled_min, scaled_max]``.

    For every feature column:
    :math:`s = (scaled\_max - scaled\_min) / (max - min)` and
    :math:`c = scaled\_min - min \cdot s`, so the scaler computes :math:`x \cdot s + c`.

    A constant column (``max == min``) is not an error. Its coefficients follow
    IEEE-754 arithmetic (``s`` is infinite) and the column transforms to NaN;
    ``fit`` logs a warning naming such columns.

    Attributes:
        scaled_min: Lower bound of the target range (default: 0.0).
        scaled_max: Upper bound of the target range (default: 1.0).
    """

    def __init__(self, scaled_min: float = 0.0, scaled_max: float = 1.0) -> None:
        super().__init__()
        self.scaled_min = float(scaled_min)
        self.scaled_max = float(scaled_max)
        self._num_features = 0
        self._min_values = _readonly(np.empty(0))
        self._max_values = _readonly(np.empty(0))
        self._scale_factors = _readonly(np.empty(0))
        self._constant_factors = _readonly(np.empty(0))

    @property
    def feature_range(self) -> tuple[float, float]:
        """The ``(scaled_min, scaled_max)`` target range."""
        return self.scaled_min, self.scaled_max

    @property
    def num_features(self) -> int:
        """Number of features seen during fit."""
        return self._num_features

    @property
    def min_values(self) -> np.ndarray:
        """Per-feature minimum, aligned with ``data_columns``."""
        return self._min_values

    @property
    def max_values(self) -> np.ndarray:
        """Per-feature maximum, aligned with ``data_columns``."""
        return self._max_values

    @property
    def scale_factors(self) -> np.ndarray:
        return self._scale_factors

    @property
    def constant_factors(self) -> np.ndarray:
        return self._constant_factors

    def _fit(self, inputs: Dataset) -> None:
        # initial bounds keep the reduction defined for a dataset without rows
        min_values = inputs.data.min(axis=0, initial=np.inf)
        max_values = inputs.data.max(axis=0, initial=-np.inf)

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            scale_factors = (self.scaled_max - self.scaled_min) / (max_values - min_values)
            constant_factors = self.scaled_min - min_values * scale_factors

        if degenerate := [col for col, lo, hi in zip(inputs.data_columns, min_values, max_values) if lo == hi]:
            logger.warning("Constant features cannot be rescaled and will transform to NaN: %s", ", ".join(degenerate))

        self._num_features = len(inputs.data_columns)
        self._min_values = _readonly(min_values)
        self._max_values = _readonly(max_values)
        self._scale_factors = _readonly(scale_factors)
        self._constant_factors = _readonly(constant_factors)
        logger.info(
            "Fitted min-max scaler on %d features into range [%s, %s]",
            self._num_features,
            self.scaled_min,
            self.scaled_max,
        )

    def _make_preprocessor(self) -> "MinMaxScaler":
        return MinMaxScaler(self)


class MinMaxScaler(Preprocessor[Dataset, Dataset, MinMaxFitter]):
    """Apply the coefficients learned by :class:`MinMaxFitter`.

    Feature minima and maxima land on ``scaled_min`` and ``scaled_max`` up to
    float rounding of ``x * s + c``; the Iris ``Id`` maximum scales to
    ``0.9999999999999999``.

    Example:
        >>> from tabprep.data import iris
        >>> ds = iris.load()
        >>> scaler = MinMaxFitter().fit(ds)
        >>> scaled = scaler.transform(ds)
        >>> np.allclose(scaled.data.min(axis=0), 0.0), np.allclose(scaled.data.max(axis=0), 1.0)
        (True, True)
    """

    def transform(self, inputs: Dataset) -> Dataset:
        """Rescale every feature of ``inputs``.

        Returns:
            New dataset with the same shape, columns and target.

        Raises:
            InvalidStateError: If ``inputs`` has a different number of features than seen during fit.
        """
        fitter = self.fitter
        if len(inputs.data_columns) != fitter.num_features:
            raise InvalidStateError(
                f"Fitter's number of features ({fitter.num_features}) does not match "
                f"dataset's number of features ({len(inputs.data_columns)})",
            )
        with np.errstate(invalid="ignore", over="ignore"):
            scaled = inputs.data * fitter.scale_factors + fitter.constant_factors
        return Dataset(
            data=scaled,
            target=inputs.target,
            data_columns=inputs.data_columns,
            target_column=inputs.target_column,
        )
