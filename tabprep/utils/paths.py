from pathlib import Path
from typing import Literal

from tabprep.errors import InvalidParametersError


__all__ = ["get_data_dir", "get_dataset_path"]


_DATASET_MAP: dict[str, str] = {
    "iris": "iris.csv",
}


def get_data_dir() -> Path:
    """Get the path to the bundled data directory.

    Returns:
        Path to the data directory shipped with the package
    """
    data_dir = (Path(__file__).parents[1] / "data" / "_data").resolve()
    assert data_dir.exists(), f"Data directory not found at {data_dir}"
    return data_dir


def get_dataset_path(filename: Literal["iris"] | str) -> Path:  # noqa: PYI051
    """Get the full path to a dataset file in the data directory.

    Args:
        filename: Key to known dataset or custom filename

    Returns:
        Full path to the dataset file inside the bundled data directory

    Raises:
        InvalidParametersError: If ``filename`` names neither a known dataset nor an existing file.

    Supported: iris.csv
    """
    ds_path = get_data_dir() / _DATASET_MAP.get(filename, filename)
    if not ds_path.is_file():
        raise InvalidParametersError(
            f"Unknown dataset {filename!r}; expected one of {sorted(_DATASET_MAP)} or a file in {ds_path.parent}.",
        )
    return ds_path
