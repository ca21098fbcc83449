import json

import pytest

import config
from charts import load_series
from selection import SelectionModel
from stations import load_catalog


@pytest.fixture
def catalog():
    return load_catalog(config.STATION_FILE)


@pytest.fixture
def series():
    return load_series(config.AVAILABILITY_FILE)


@pytest.fixture
def model():
    return SelectionModel()


@pytest.fixture
def write_json(tmp_path):
    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write
