"""
Page-level constants for the BlueSG Station Explorer.

Fixture locations, map viewport, colours and logging settings.
"""

from pathlib import Path

# --- PAGE ---
PAGE_TITLE = "BlueSG Stations – Jurong West"
SHEET_SUBTITLE = "BlueSG availability for next 7 days"

# --- FIXTURES ---
BASE_DIR = Path(__file__).resolve().parent
STATION_FILE = BASE_DIR / "station_information.json"
AVAILABILITY_FILE = BASE_DIR / "availability.json"

# --- MAP VIEWPORT ---
# 0.01 degree span around the campus side of Jurong West
MAP_CENTER = (1.3437, 103.68541)
MAP_ZOOM = 16
MAP_HEIGHT = 520
MAP_TILES = "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"
MAP_ATTRIBUTION = "© OpenStreetMap contributors © CARTO"

PIN_COLOR = "#FF3B30"
LABEL_BACKGROUND = "#FFFFFF"

# --- CHART ---
ACCENT_COLOR = "#FF2D55"     # systemPink
SECONDARY_COLOR = "#32ADE6"  # systemCyan
CHART_HEIGHT = 220
CHART_Y_RANGE = (0, 100)

# --- LOGGING ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
