"""Tests for the fit/transform protocol shared by all preprocessors."""

import pytest

from tabprep.data import Dataset
from tabprep.errors import InvalidStateError, UntrainedModelError
from tabprep.preprocessing import (
    FitStatus,
    LabelEncoder,
    LabelEncoderFitter,
    MinMaxFitter,
    MinMaxScaler,
    OneHotEncoder,
    OneHotEncoderFitter,
)


@pytest.mark.parametrize("fitter_cls", [LabelEncoderFitter, OneHotEncoderFitter, MinMaxFitter])
def test_new_fitter_is_not_fit(fitter_cls: type) -> None:
    """Freshly constructed fitters report NOT_FIT."""
    assert fitter_cls().fit_status is FitStatus.NOT_FIT


@pytest.mark.parametrize(
    ("preprocessor_cls", "fitter_cls"),
    [
        (LabelEncoder, LabelEncoderFitter),
        (OneHotEncoder, OneHotEncoderFitter),
        (MinMaxScaler, MinMaxFitter),
    ],
)
def test_preprocessor_requires_fitted_fitter(preprocessor_cls: type, fitter_cls: type) -> None:
    """A preprocessor cannot be built from an unfitted fitter."""
    with pytest.raises(UntrainedModelError):
        preprocessor_cls(fitter_cls())


def test_untrained_error_is_invalid_state() -> None:
    """Transform-before-fit surfaces as an invalid-state error."""
    with pytest.raises(InvalidStateError):
        LabelEncoder(LabelEncoderFitter())


class TestFitLifecycle:
    """Test the consume-on-fit lifecycle."""

    def test_fit_marks_fitter_fit(self) -> None:
        """The fitter handed to the preprocessor reports FIT."""
        fitter = LabelEncoderFitter()
        encoder = fitter.fit(["a", "b"])
        assert encoder.fitter is fitter
        assert encoder.fitter.fit_status is FitStatus.FIT
        assert encoder.fit_status is FitStatus.FIT

    def test_fitter_is_consumed(self) -> None:
        """A second fit on the same fitter is refused."""
        fitter = LabelEncoderFitter()
        fitter.fit(["a"])
        with pytest.raises(InvalidStateError, match="already been fit"):
            fitter.fit(["b"])

    def test_fit_transform(self, iris_dataset: Dataset) -> None:
        """fit_transform equals fit followed by transform."""
        scaler, scaled = MinMaxFitter().fit_transform(iris_dataset)
        assert isinstance(scaler, MinMaxScaler)
        assert scaled == scaler.transform(iris_dataset)

    def test_fit_does_not_mutate_input(self, iris_dataset: Dataset) -> None:
        """Fitting and transforming leave the input dataset untouched."""
        before = iris_dataset.data.copy()
        MinMaxFitter().fit_transform(iris_dataset)
        assert (iris_dataset.data == before).all()
