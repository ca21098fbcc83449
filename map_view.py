import folium
from branca.element import MacroElement
from jinja2 import Template

import config
from log_setup import get_logger
from stations import catalog_frame

logger = get_logger(__name__)


def annotation_html(name: str) -> str:
    return f"""
    <div style=\"display:flex; flex-direction:column; align-items:center; transform:translate(-50%, -100%); width:max-content;\">
      <div style=\"font-size:13px; padding:5px; background:{config.LABEL_BACKGROUND}; border-radius:10px;
                  box-shadow:0 1px 4px rgba(0,0,0,0.2); white-space:nowrap;\">{name}</div>
      <div style=\"width:22px; height:22px; border-radius:50%; background:{config.PIN_COLOR};
                  border:3px solid white; box-sizing:border-box;\"></div>
      <div style=\"width:0; height:0; margin-top:-3px; border-left:6px solid transparent;
                  border-right:6px solid transparent; border-top:8px solid {config.PIN_COLOR};\"></div>
    </div>
    """


def hint_html(count: int) -> str:
    return f"""
    <div id=\"hint-box\" style=\"
      position: fixed;
      left: 20px;
      bottom: 20px;
      z-index: 9999;
      background: rgba(255,255,255,0.95);
      border-radius: 10px;
      box-shadow: 0 2px 12px rgba(0,0,0,0.15);
      width: 260px;
      font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;
      overflow: hidden;
    \" >
      <div id=\"hint-header\" style=\"
        padding: 10px 14px;
        cursor: pointer;
        user-select: none;
        display:flex;
        align-items:center;
        justify-content:space-between;
      \" onclick=\"(function(){{var b=document.getElementById('hint-body'); if(b.style.display==='none'){{b.style.display='block';}} else {{b.style.display='none';}}}})()\">
        <div style=\"font-size:15px; font-weight:800;\">BlueSG stations</div>
        <div style=\"font-size:18px; color:#333;\">▾</div>
      </div>

      <div id=\"hint-body\" style=\"padding: 0 14px 12px 14px; display:none;\">
        <div style=\"font-size:12px; color:#333;\"><b>{count}</b> stations shown</div>
        <div style=\"font-size:11px; color:#666; margin-top:6px;\">Tap a station to see its availability.</div>
      </div>
    </div>
    """


class Hint(MacroElement):
    def __init__(self, html):
        super().__init__()
        self._template = Template(f"{{% macro html(this, kwargs) %}}{html}{{% endmacro %}}")


def build_station_map(catalog) -> folium.Map:
    m = folium.Map(location=list(config.MAP_CENTER), zoom_start=config.MAP_ZOOM, tiles=None, control_scale=True)

    folium.TileLayer(
        tiles=config.MAP_TILES,
        attr=config.MAP_ATTRIBUTION,
        name="CartoDB Positron",
        control=False,
    ).add_to(m)

    for s in catalog:
        folium.Marker(
            location=[s.latitude, s.longitude],
            icon=folium.DivIcon(html=annotation_html(s.name)),
            tooltip=s.name,
        ).add_to(m)

    m.get_root().add_child(Hint(hint_html(len(catalog))))
    return m


def station_at(catalog, click_lat: float, click_lon: float):
    """Station closest to a tap; ties go to the earlier catalog entry."""
    if not catalog:
        raise ValueError("cannot resolve a tap against an empty station catalog")
    tmp = catalog_frame(catalog)
    tmp["dist2"] = (tmp["lat"] - float(click_lat)) ** 2 + (tmp["lon"] - float(click_lon)) ** 2
    idx = int(tmp["dist2"].idxmin())
    return catalog[idx]


def forward_tap(model, catalog, map_state):
    """Pass the station behind the last tapped marker to ``model``; ``None`` if no tap."""
    clicked = (map_state or {}).get("last_object_clicked")
    if not clicked:
        return None
    station = station_at(catalog, clicked["lat"], clicked["lng"])
    logger.info("Tapped station %s (%s)", station.name, station.id)
    model.select_station(station)
    return station


def forward_new_tap(model, catalog, map_state, last_tap):
    """Forward the tap only if it differs from ``last_tap``; returns the tap to remember.

    st_folium reports the same ``last_object_clicked`` on every rerun.
    """
    tap = (map_state or {}).get("last_object_clicked")
    if not tap or tap == last_tap:
        return last_tap
    forward_tap(model, catalog, map_state)
    return tap
