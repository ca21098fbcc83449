import dataclasses

import pytest

from stations import Station, catalog_frame, load_catalog


def test_catalog_keeps_fixture_order(catalog):
    assert [s.name for s in catalog] == [
        "953 Jurong West Street 91",
        "903 Jurong West Street 91",
        "832A Jurong West Street 81",
        "986 Jurong West Street 93",
        "624A Jurong West Street 61",
        "854A Jurong West Street 81",
    ]
    assert catalog[0].coordinate == pytest.approx((1.3424127505647119, 103.69063472264737))


def test_catalog_is_immutable(catalog):
    assert isinstance(catalog, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog[0].name = "renamed"


def test_ids_are_unique(catalog):
    assert len({s.id for s in catalog}) == len(catalog)


def test_generated_ids_when_fixture_has_none(write_json):
    path = write_json(
        "stations.json",
        {"data": {"stations": [{"name": "A", "lat": 1.0, "lon": 2.0}, {"name": "B", "lat": "1.5", "lon": 2.5}]}},
    )
    a, b = load_catalog(path)
    assert a.id and b.id and a.id != b.id
    assert b.latitude == 1.5


def test_missing_data_key(write_json):
    path = write_json("stations.json", {"stations": []})
    with pytest.raises(ValueError, match="data.stations"):
        load_catalog(path)


def test_missing_columns(write_json):
    path = write_json("stations.json", {"data": {"stations": [{"name": "A", "lat": 1.0}]}})
    with pytest.raises(ValueError, match="missing"):
        load_catalog(path)


def test_non_numeric_coordinates(write_json):
    path = write_json("stations.json", {"data": {"stations": [{"name": "A", "lat": "north", "lon": 2.0}]}})
    with pytest.raises(ValueError, match="non-numeric"):
        load_catalog(path)


def test_duplicate_station_ids(write_json):
    rows = [{"station_id": "x", "name": n, "lat": 1.0, "lon": 2.0} for n in ("A", "B")]
    path = write_json("stations.json", {"data": {"stations": rows}})
    with pytest.raises(ValueError, match="duplicate"):
        load_catalog(path)


def test_catalog_frame_matches_catalog(catalog):
    df = catalog_frame(catalog)
    assert list(df.columns) == ["station_id", "name", "lat", "lon"]
    assert df["name"].tolist() == [s.name for s in catalog]


def test_station_coordinate():
    assert Station("A", 1.25, 103.5, id="a").coordinate == (1.25, 103.5)
