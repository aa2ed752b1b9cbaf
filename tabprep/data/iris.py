"""Loader for the UCI Iris dataset bundled with the package.

150 rows, five numeric feature columns (``Id``, ``SepalLengthCm``,
``SepalWidthCm``, ``PetalLengthCm``, ``PetalWidthCm``) and the string target
``Species`` with the classes ``Iris-setosa``, ``Iris-versicolor`` and
``Iris-virginica`` (50 rows each, in that order).

Example:
    >>> from tabprep.data import iris
    >>> ds = iris.load()
    >>> ds.n_rows, ds.n_cols, ds.target_column
    (150, 5, 'Species')
"""

from tabprep.utils.paths import get_dataset_path

from .dataset import Dataset


TARGET_COLUMN = "Species"


def load() -> Dataset:
    """Load the bundled Iris dataset with ``Species`` as string target."""
    return Dataset.from_csv(get_dataset_path("iris"), TARGET_COLUMN)
