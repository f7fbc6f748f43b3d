import matplotlib
import pytest

matplotlib.use("Agg")

from colorglobe.compute import generate_dots  # noqa: E402


@pytest.fixture
def dots():
    return generate_dots(200, 42)
