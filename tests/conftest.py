import json

import matplotlib
import pytest

matplotlib.use("Agg")

from starmap3d.models import StarRecord  # noqa: E402


@pytest.fixture
def sirius_row():
    return {
        "name": "Sirius",
        "ra": 101.2872,
        "dec": -16.7161,
        "distance_pc": 2.6371,
        "luminosity": 25.4,
        "estimated_temperature": 9940,
    }


@pytest.fixture
def rows(sirius_row):
    """Two catalog rows: Sirius and a star on the +x axis."""
    return [
        sirius_row,
        {
            "name": "Axis",
            "ra": 0.0,
            "dec": 0.0,
            "distance_pc": 5.0,
            "luminosity": 1.0,
            "estimated_temperature": 5778,
        },
    ]


@pytest.fixture
def catalog_file(tmp_path, rows):
    path = tmp_path / "stars.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path


@pytest.fixture
def axis_record():
    return StarRecord(
        name="Axis",
        ra_deg=0.0,
        dec_deg=0.0,
        distance_pc=5.0,
        luminosity=1.0,
        temperature_k=5778,
    )
