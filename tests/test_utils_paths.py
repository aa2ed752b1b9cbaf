"""Utility path resolution tests."""

import pytest

from tabprep.errors import ErrorKind, InvalidParametersError
from tabprep.utils.paths import get_data_dir, get_dataset_path


def test_get_dataset_path_iris() -> None:
    """Ensure bundled dataset path resolution works."""
    data_dir = get_data_dir()
    iris_path = get_dataset_path("iris")

    assert iris_path.exists()
    assert iris_path.parent == data_dir
    assert iris_path.name == "iris.csv"


def test_get_dataset_path_accepts_filename() -> None:
    """A plain filename inside the data directory resolves too."""
    assert get_dataset_path("iris.csv") == get_dataset_path("iris")


def test_get_dataset_path_unknown_name() -> None:
    """Unknown dataset names are rejected as invalid parameters."""
    with pytest.raises(InvalidParametersError) as exc_info:
        get_dataset_path("does_not_exist")
    assert exc_info.value.kind is ErrorKind.INVALID_PARAMETERS
