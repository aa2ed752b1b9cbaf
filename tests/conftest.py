"""Test configuration for tabprep."""

from pathlib import Path
import sys

import pytest


# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="session")
def iris_dataset():
    """Load the bundled Iris dataset once per test session."""
    from tabprep.data import iris

    return iris.load()


@pytest.fixture
def pokemon_csv(tmp_path: Path) -> Path:
    """Small excerpt of the Pokemon stats table with two categorical columns."""
    csv_path = tmp_path / "pokemon.csv"
    csv_path.write_text(
        "#,Name,Type 1,Type 2,Total,HP,Attack,Legendary\n"
        "1,Bulbasaur,Grass,Poison,318,45,49,False\n"
        "4,Charmander,Fire,,309,39,52,False\n"
        "7,Squirtle,Water,,314,44,48,False\n"
        "6,Charizard,Fire,Flying,534,78,84,False\n"
        "144,Articuno,Ice,Flying,580,90,85,True\n",
    )
    return csv_path


@pytest.fixture
def pokemon_numeric_columns() -> list[str]:
    """Numeric columns of the Pokemon excerpt."""
    return ["#", "Total", "HP", "Attack"]
