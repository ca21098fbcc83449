import streamlit as st

import config
from charts import availability_figure
from selection import Selection, SheetState

# Absolute sheet heights in pixels
SHEET_HEIGHTS = {
    SheetState.HIDDEN: 0,
    SheetState.COLLAPSED: 125,
    SheetState.EXPANDED: 325,
}


def sheet_height(state: SheetState) -> int:
    return SHEET_HEIGHTS[state]


def header_text(selection: Selection) -> str:
    if selection.sheet_state is SheetState.HIDDEN:
        return ""
    return selection.selected_station_name


def render_sheet(model, series) -> bool:
    """Draw the sheet for the model's current state; True if the close button dismissed it."""
    selection = model.current_state()
    if selection.sheet_state is SheetState.HIDDEN:
        return False

    with st.container(height=sheet_height(selection.sheet_state), border=True):
        col_title, col_close = st.columns([8, 1])
        with col_title:
            st.markdown(
                f"""
                <div style='font-size:26px;font-weight:700;line-height:1.2;'>{header_text(selection)}</div>
                <div style='font-size:14px;color:#666;margin-bottom:4px;'>{config.SHEET_SUBTITLE}</div>
                """,
                unsafe_allow_html=True,
            )
        with col_close:
            if st.button("✕", key="close_sheet", help="Close"):
                model.dismiss()
                return True

        st.divider()

        if selection.sheet_state is SheetState.EXPANDED:
            st.plotly_chart(availability_figure(series), use_container_width=True, config={"displayModeBar": False})

    return False
