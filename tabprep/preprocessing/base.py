"""Two-phase fit/transform contract shared by all preprocessors."""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, Generic, TypeVar

from tabprep.errors import InvalidStateError, UntrainedModelError


InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")
FitterT = TypeVar("FitterT", bound="PreprocessorFitter")
PreprocessorT = TypeVar("PreprocessorT", bound="Preprocessor")


class FitStatus(StrEnum):
    """Whether a fitter has completed its one-shot training pass."""

    NOT_FIT = "not_fit"
    FIT = "fit"


class PreprocessorFitter(ABC, Generic[InputT, PreprocessorT]):
    """Abstract base class for the training half of a preprocessor.

    A fitter holds configuration only. ``fit`` inspects the training input
    once, stores the learned state on the fitter and hands the fitter over to
    a new :class:`Preprocessor`. The fitter is consumed in the process: it
    reports :attr:`FitStatus.FIT` from then on and refuses a second ``fit``.
    A preprocessor can only be built from a fitted fitter, so there is no
    "transform before fit" state to check at transform time.


    ---


    ### Adding a New Preprocessor

    ```python
    class MyFitter(PreprocessorFitter[Dataset, "MyPreprocessor"]):
        '''Learns per-feature state.'''

        def __init__(self, option: float = 1.0) -> None:
            super().__init__()
            self.option = option
            self._state: np.ndarray = np.empty(0)

        def _fit(self, inputs: Dataset) -> None:
            self._state = ...  # read-only after fit

        def _make_preprocessor(self) -> "MyPreprocessor":
            return MyPreprocessor(self)


    class MyPreprocessor(Preprocessor[Dataset, Dataset, MyFitter]):
        '''Applies the learned state.'''

        def transform(self, inputs: Dataset) -> Dataset:
            if ...:  # input schema does not match the fitted state
                raise InvalidStateError("...")
            return Dataset(...)  # always a new instance
    ```

    **Key principles:**

    - ``_fit`` must not mutate ``inputs`` and must be deterministic
    - ``transform`` reads the fitter's state but never writes it, so one
      preprocessor can serve any number of ``transform`` calls
    - Schema mismatches at transform time raise :class:`~tabprep.errors.InvalidStateError`
    """

    def __init__(self) -> None:
        self._fit_status = FitStatus.NOT_FIT

    @property
    def fit_status(self) -> FitStatus:
        """Current fit status of this fitter."""
        return self._fit_status

    def fit(self, inputs: InputT) -> PreprocessorT:
        """Fit to ``inputs`` and return the preprocessor holding the learned state.

        Args:
            inputs: Training input

        Returns:
            Preprocessor ready to transform schema-compatible inputs.

        Raises:
            InvalidStateError: If this fitter was already consumed by an earlier ``fit``.
        """
        if self._fit_status is FitStatus.FIT:
            raise InvalidStateError(
                f"{type(self).__name__} has already been fit; create a new fitter to fit other data.",
            )
        self._fit(inputs)
        self._fit_status = FitStatus.FIT
        return self._make_preprocessor()

    def fit_transform(self, inputs: InputT) -> tuple[PreprocessorT, Any]:
        """Fit to ``inputs`` and transform them in one call.

        Returns:
            The fitted preprocessor and the transformed ``inputs``.
        """
        preprocessor = self.fit(inputs)
        return preprocessor, preprocessor.transform(inputs)

    @abstractmethod
    def _fit(self, inputs: InputT) -> None:
        """Compute and store the state the preprocessor needs."""
        ...

    @abstractmethod
    def _make_preprocessor(self) -> PreprocessorT:
        """Wrap this (fitted) fitter into its preprocessor."""
        ...


class Preprocessor(ABC, Generic[InputT, OutputT, FitterT]):
    """Abstract base class for the applying half of a preprocessor."""

    def __init__(self, fitter: FitterT) -> None:
        """Wrap a fitted fitter.

        Args:
            fitter: Fitter whose ``fit`` has completed

        Raises:
            UntrainedModelError: If ``fitter`` has not been fit.
        """
        if fitter.fit_status is not FitStatus.FIT:
            raise UntrainedModelError(
                f"Cannot build {type(self).__name__} from an unfitted {type(fitter).__name__}; call fit() first.",
            )
        self._fitter = fitter

    @property
    def fitter(self) -> FitterT:
        """The fitted fitter, exposing the learned state for inspection."""
        return self._fitter

    @property
    def fit_status(self) -> FitStatus:
        return self._fitter.fit_status

    @abstractmethod
    def transform(self, inputs: InputT) -> OutputT:
        """Apply the fitted state to ``inputs`` and return a new value.

        Raises:
            InvalidStateError: If ``inputs`` does not match the fitted state.
        """
        ...
