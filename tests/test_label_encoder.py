"""Tests for the label encoder."""

import numpy as np
import pytest

from tabprep.data import Dataset
from tabprep.errors import InvalidParametersError, InvalidStateError
from tabprep.preprocessing import FitStatus, LabelEncoderFitter


class TestLabelEncoder:
    """Test first-seen code assignment and lookup."""

    def test_first_seen_order(self) -> None:
        """Codes follow first appearance, not sort order."""
        encoder = LabelEncoderFitter().fit(["b", "a", "b", "c"])
        assert dict(encoder.fitter.label_map) == {"b": 0, "a": 1, "c": 2}
        assert list(encoder.fitter.label_map) == ["b", "a", "c"]
        np.testing.assert_array_equal(encoder.transform(["b", "a", "b", "c"]), [0.0, 1.0, 0.0, 2.0])

    def test_deterministic(self) -> None:
        """Fitting the same labels twice yields the same mapping."""
        labels = ["x", "z", "y", "x", "z"]
        first = LabelEncoderFitter().fit(labels)
        second = LabelEncoderFitter().fit(labels)
        assert dict(first.fitter.label_map) == dict(second.fitter.label_map)

    def test_default_dtype_is_float(self) -> None:
        """Codes come back as float64 unless configured otherwise."""
        codes = LabelEncoderFitter().fit(["a"]).transform(["a", "a"])
        assert codes.dtype == np.float64

    def test_integer_dtype(self) -> None:
        """An integer dtype can be requested."""
        codes = LabelEncoderFitter(dtype=np.int64).fit([True, False]).transform([False, True])
        assert codes.dtype == np.int64
        assert codes.tolist() == [1, 0]

    def test_non_numeric_dtype_rejected(self) -> None:
        """Only numeric dtypes are valid configuration."""
        with pytest.raises(InvalidParametersError):
            LabelEncoderFitter(dtype=str)

    def test_codes_overflow_narrow_dtype(self) -> None:
        """More labels than the dtype can hold is a configuration error at fit time."""
        fitter = LabelEncoderFitter(dtype=np.int8)
        with pytest.raises(InvalidParametersError, match="200 distinct labels"):
            fitter.fit(range(200))
        assert fitter.fit_status is FitStatus.NOT_FIT

    def test_narrow_dtype_at_capacity(self) -> None:
        """Codes up to the dtype maximum are accepted."""
        codes = LabelEncoderFitter(dtype=np.int8).fit(range(128)).transform([127, 0])
        assert codes.tolist() == [127, 0]

    def test_unseen_label(self) -> None:
        """Labels not seen during fit are a hard error."""
        encoder = LabelEncoderFitter().fit(["a", "b"])
        with pytest.raises(InvalidStateError, match="'c' not found in encoder"):
            encoder.transform(["a", "c"])

    def test_label_map_read_only(self) -> None:
        """The fitted mapping cannot be modified."""
        encoder = LabelEncoderFitter().fit(["a"])
        with pytest.raises(TypeError):
            encoder.fitter.label_map["b"] = 1  # type: ignore[index]

    def test_label_map_empty_before_fit(self) -> None:
        """An unfitted fitter exposes an empty mapping."""
        assert dict(LabelEncoderFitter().label_map) == {}

    def test_empty_input(self) -> None:
        """Empty label sequences are accepted."""
        encoder = LabelEncoderFitter().fit([])
        assert encoder.transform([]).shape == (0,)

    def test_inverse_transform(self) -> None:
        """Codes map back to the original labels."""
        encoder = LabelEncoderFitter().fit(["b", "a", "c"])
        assert encoder.inverse_transform([2.0, 0.0, 1]) == ["c", "b", "a"]

    @pytest.mark.parametrize("code", [3, -1, 0.5, float("nan")])
    def test_inverse_transform_unknown_code(self, code: float) -> None:
        """Codes outside the fitted range are rejected."""
        encoder = LabelEncoderFitter().fit(["b", "a", "c"])
        with pytest.raises(InvalidStateError):
            encoder.inverse_transform([code])

    def test_reusable_on_other_data(self) -> None:
        """One encoder transforms several compatible inputs."""
        encoder = LabelEncoderFitter().fit(["low", "mid", "high"])
        np.testing.assert_array_equal(encoder.transform(["high"]), [2.0])
        np.testing.assert_array_equal(encoder.transform(["mid", "low"]), [1.0, 0.0])


def test_iris_species_codes(iris_dataset: Dataset) -> None:
    """Iris species map to 0, 1, 2 in file order."""
    encoder = LabelEncoderFitter().fit(iris_dataset.target)
    codes = encoder.transform(iris_dataset.target)

    assert encoder.fitter.fit_status is FitStatus.FIT
    assert dict(encoder.fitter.label_map) == {
        "Iris-setosa": 0,
        "Iris-versicolor": 1,
        "Iris-virginica": 2,
    }
    assert codes.shape == (150,)
    np.testing.assert_array_equal(codes, np.repeat([0.0, 1.0, 2.0], 50))
