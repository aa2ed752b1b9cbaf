"""Tests for the bundled Iris dataset."""

from tabprep.data import Dataset


def test_iris_shape(iris_dataset: Dataset) -> None:
    """The Iris table has 150 rows and five numeric features."""
    assert iris_dataset.n_rows == 150
    assert iris_dataset.n_cols == 5
    assert len(iris_dataset.target) == 150


def test_iris_columns(iris_dataset: Dataset) -> None:
    """Feature columns follow the header order with the target removed."""
    assert iris_dataset.data_columns == (
        "Id",
        "SepalLengthCm",
        "SepalWidthCm",
        "PetalLengthCm",
        "PetalWidthCm",
    )
    assert iris_dataset.target_column == "Species"


def test_iris_species(iris_dataset: Dataset) -> None:
    """Three species with 50 rows each, in file order."""
    assert iris_dataset.target[0] == "Iris-setosa"
    assert iris_dataset.target[50] == "Iris-versicolor"
    assert iris_dataset.target[149] == "Iris-virginica"
    assert {species: iris_dataset.target.count(species) for species in set(iris_dataset.target)} == {
        "Iris-setosa": 50,
        "Iris-versicolor": 50,
        "Iris-virginica": 50,
    }
