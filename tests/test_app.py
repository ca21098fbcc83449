import logging

import pytest
from streamlit.testing.v1 import AppTest

import config
from selection import Selection, SelectionModel, SheetState

APP_FILE = str(config.BASE_DIR / "app.py")
STATION = "953 Jurong West Street 91"


@pytest.fixture
def app():
    at = AppTest.from_file(APP_FILE, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def model_of(at) -> SelectionModel:
    return at.session_state["selection"]


def markdown_text(at) -> str:
    return "\n".join(m.value for m in at.markdown)


def close_buttons(at):
    return [b for b in at.button if b.key == "close_sheet"]


def test_first_load_shows_map_without_sheet(app):
    assert model_of(app).current_state() == Selection()
    assert app.title[0].value == config.PAGE_TITLE
    assert close_buttons(app) == []
    assert config.SHEET_SUBTITLE not in markdown_text(app)
    assert app.get("plotly_chart") == []


def test_selected_station_opens_expanded_sheet(app):
    model_of(app).select_station(STATION)
    app.run()

    assert not app.exception
    text = markdown_text(app)
    assert STATION in text
    assert config.SHEET_SUBTITLE in text
    assert len(close_buttons(app)) == 1
    assert len(app.get("plotly_chart")) == 1


def test_collapsed_sheet_has_header_but_no_chart(app):
    app.session_state["selection"] = SelectionModel(Selection(STATION, SheetState.COLLAPSED))
    app.run()

    assert STATION in markdown_text(app)
    assert len(close_buttons(app)) == 1
    assert app.get("plotly_chart") == []


def test_close_button_dismisses_and_resets_map(app):
    model_of(app).select_station(STATION)
    app.run()
    app.session_state["_last_tap"] = {"lat": 1.3424127505647119, "lng": 103.69063472264737}

    app.button(key="close_sheet").click().run()

    assert not app.exception
    assert model_of(app).current_state() == Selection(STATION, SheetState.HIDDEN)
    assert app.session_state["_map_nonce"] == 1
    assert app.session_state["_last_tap"] is None
    assert close_buttons(app) == []
    assert STATION not in markdown_text(app)


def test_remembered_tap_survives_rerun_without_reselecting(app):
    tap = {"lat": 1.3397098246517167, "lng": 103.68617152688654}
    app.session_state["_last_tap"] = tap
    app.run()

    assert app.session_state["_last_tap"] == tap
    assert model_of(app).current_state().sheet_state is SheetState.HIDDEN
    assert app.session_state["_map_nonce"] == 0


def test_selection_changes_logged_at_debug(app, caplog):
    with caplog.at_level(logging.DEBUG, logger="app"):
        model_of(app).select_station(STATION)
        model_of(app).dismiss()

    records = [r for r in caplog.records if r.name == "app"]
    assert len(records) == 2
    assert {r.levelno for r in records} == {logging.DEBUG}
    assert STATION in records[0].getMessage()
