# ============================================================
# BlueSG Stations – Jurong West (Availability Explorer)
# ============================================================

import streamlit as st
from streamlit_folium import st_folium

import config
from charts import load_series
from log_setup import get_logger, setup_logging
from map_view import build_station_map, forward_new_tap
from selection import SelectionModel
from sheet import render_sheet
from stations import load_catalog

st.set_page_config(page_title=config.PAGE_TITLE, layout="wide")

setup_logging()
logger = get_logger("app")


@st.cache_data(show_spinner=False)
def load_data():
    return load_catalog(config.STATION_FILE), load_series(config.AVAILABILITY_FILE)


def log_selection(selection):
    logger.debug("Sheet %s for %r", selection.sheet_state.value, selection.selected_station_name)


if "selection" not in st.session_state:
    st.session_state.selection = SelectionModel()
    st.session_state.selection.subscribe(log_selection)
if "_map_nonce" not in st.session_state:
    st.session_state._map_nonce = 0
if "_last_tap" not in st.session_state:
    st.session_state._last_tap = None

model = st.session_state.selection

st.title(config.PAGE_TITLE)

try:
    catalog, series = load_data()
except (OSError, ValueError) as exc:
    logger.error("Could not load fixtures: %s", exc)
    st.error(f"Could not load station data: {exc}")
    st.stop()

out = st_folium(
    build_station_map(catalog),
    height=config.MAP_HEIGHT,
    use_container_width=True,
    returned_objects=["last_object_clicked"],
    key=f"map_{st.session_state.get('_map_nonce', 0)}",
)

st.session_state._last_tap = forward_new_tap(model, catalog, out, st.session_state._last_tap)

if render_sheet(model, series):
    st.session_state._last_tap = None
    st.session_state._map_nonce = int(st.session_state.get("_map_nonce", 0)) + 1
    st.rerun()
