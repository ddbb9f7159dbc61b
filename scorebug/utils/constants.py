"""
Constants for the indoor hockey scoreboard overlay.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Indoor Hockey Score Bug"

# Clock timing
TICK_INTERVAL_SECONDS = 1.0
HALF_LENGTH_MIN = 20  # indoor halves are 20 minutes

# Period labels as shown on the bug
PERIOD_FIRST_HALF = "1MT"
PERIOD_HALF_TIME = "MT"
PERIOD_SECOND_HALF = "2MT"
PERIOD_FULL_TIME = "FIN"

# Goal reveal sequence, relative to the goal being recorded
GOAL_REVEAL_DELAY_SECONDS = 1.5
GOAL_SEQUENCE_DURATION_SECONDS = 4.5

# Card presets offered on the control surface (type, minutes)
CARD_PRESETS = [
    ("GREEN", 2),
    ("YELLOW", 5),
    ("YELLOW", 10),
    ("RED", 0),
]

# Team fields the operator may edit during a match
EDITABLE_TEAM_FIELDS = ("name", "short_name", "tri_code", "primary_color")

# camelCase names accepted from older control panels
TEAM_FIELD_ALIASES = {
    "shortName": "short_name",
    "triCode": "tri_code",
    "primaryColor": "primary_color",
}

HOME_TEAM_ID = "home"
AWAY_TEAM_ID = "away"

DEFAULT_HOME_TEAM = {
    "id": HOME_TEAM_ID,
    "name": "Lille M.H.C",
    "short_name": "Lille",
    "tri_code": "LIL",
    "primary_color": "#e11d48",
    "is_home": True,
}

DEFAULT_AWAY_TEAM = {
    "id": AWAY_TEAM_ID,
    "name": "CA Montrouge 92",
    "short_name": "Montrouge",
    "tri_code": "CAM",
    "primary_color": "#f97316",
    "is_home": False,
}
