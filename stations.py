import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from log_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Station:
    """A named BlueSG dock on the map."""

    name: str
    latitude: float
    longitude: float
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def load_catalog(path) -> tuple[Station, ...]:
    """Read the GBFS-style station fixture, keeping the file order."""
    with open(Path(path), "r") as f:
        j = json.load(f)

    try:
        raw = j["data"]["stations"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"{path}: expected data.stations in station fixture") from exc

    stations = pd.DataFrame(raw)
    missing = {"name", "lat", "lon"} - set(stations.columns)
    if missing:
        raise ValueError(f"{path}: station fixture is missing {sorted(missing)}")

    stations["lat"] = pd.to_numeric(stations["lat"], errors="coerce")
    stations["lon"] = pd.to_numeric(stations["lon"], errors="coerce")
    bad = stations[stations[["lat", "lon"]].isna().any(axis=1)]
    if not bad.empty:
        raise ValueError(f"{path}: non-numeric coordinates for {bad['name'].astype(str).tolist()}")

    catalog = []
    for r in stations.to_dict("records"):
        sid = r.get("station_id")
        kwargs = {} if sid is None or pd.isna(sid) else {"id": str(sid)}
        catalog.append(Station(name=str(r["name"]), latitude=float(r["lat"]), longitude=float(r["lon"]), **kwargs))

    ids = [s.id for s in catalog]
    if len(set(ids)) != len(ids):
        raise ValueError(f"{path}: duplicate station_id in station fixture")

    logger.info("Loaded %d stations from %s", len(catalog), path)
    return tuple(catalog)


def catalog_frame(catalog) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "station_id": [s.id for s in catalog],
            "name": [s.name for s in catalog],
            "lat": [s.latitude for s in catalog],
            "lon": [s.longitude for s in catalog],
        }
    )
