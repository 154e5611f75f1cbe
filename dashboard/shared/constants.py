"""Shared constants for the strategy lab dashboard."""

from __future__ import annotations

F1_RED = "#E10600"

COMPOUND_COLORS: dict[str, str] = {
    "Soft": "#FF3333",
    "Medium": "#FFC700",
    "Hard": "#FFFFFF",
    "Intermediate": "#39B54A",
    "Wet": "#0067FF",
    "Unknown": "#888888",
}

TIRE_CONDITION_COLORS: dict[str, str] = {
    "Fresh": "#39B54A",
    "Good": "#FFC700",
    "Worn": "#FF8700",
    "Aged": "#FF3333",
}

SEVERITY_COLORS: dict[str, str] = {
    "minor": "#FFC700",
    "moderate": "#FF8700",
    "major": "#FF3333",
}

EVENT_LABELS: dict[str, str] = {
    "PIT": "Pit stop",
    "OVERTAKE": "Overtake",
    "FASTEST_LAP": "Fastest lap",
    "INFO": "Info",
    "DRS": "DRS",
    "VSC": "Virtual Safety Car",
    "MECHANICAL_ISSUE": "Mechanical issue",
    "TIRE_WEAR": "Tire wear",
}

TRACK_TYPES = ["Any", "High-Speed", "Technical", "Street Circuit"]
WEATHER_PATTERNS = ["Any", "Predictable", "Variable", "Wet Race"]

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

# Fallback colors for disambiguating teammates with the same team color
COMPARISON_COLORS: list[str] = [
    "#00D2BE",  # teal
    "#FF8700",  # orange
    "#BF00FF",  # purple
    "#FFD700",  # gold
    "#7FFF00",  # chartreuse
    "#FF69B4",  # pink
]

TEAMS: dict[str, dict] = {
    "McLaren": {"color": "#FF8000", "drivers": ["L. Norris", "O. Piastri"]},
    "Red Bull Racing": {"color": "#3671C6", "drivers": ["M. Verstappen", "I. Hadjar"]},
    "Ferrari": {"color": "#E8002D", "drivers": ["C. Leclerc", "L. Hamilton"]},
    "Mercedes": {"color": "#27F4D2", "drivers": ["G. Russell", "K. Antonelli"]},
    "Aston Martin": {"color": "#229971", "drivers": ["F. Alonso", "L. Stroll"]},
    "Alpine": {"color": "#FF87BC", "drivers": ["P. Gasly", "F. Colapinto"]},
    "Williams": {"color": "#64C4FF", "drivers": ["A. Albon", "C. Sainz"]},
    "Racing Bulls": {"color": "#6692FF", "drivers": ["L. Lawson", "A. Lindblad"]},
    "Haas": {"color": "#B6BABD", "drivers": ["E. Ocon", "O. Bearman"]},
    "Audi": {"color": "#FF1E00", "drivers": ["N. Hulkenberg", "G. Bortoleto"]},
    "Cadillac": {"color": "#000000", "drivers": ["S. Perez", "V. Bottas"]},
}

DEFAULT_TRACK = "Silverstone"
DEFAULT_WEATHER = "Sunny"
DEFAULT_RACE_LAPS = 52
MIN_CUSTOM_LAPS = 20
MAX_CUSTOM_LAPS = 100

DEFAULT_GRID: list[str] = [
    "L. Norris", "M. Verstappen", "C. Leclerc", "O. Piastri", "G. Russell",
    "L. Hamilton", "C. Sainz", "S. Perez", "F. Alonso", "Y. Tsunoda",
    "L. Stroll", "D. Ricciardo", "A. Albon", "P. Gasly", "E. Ocon",
    "K. Magnussen", "N. Hulkenberg", "V. Bottas", "G. Zhou", "L. Sargeant",
]
