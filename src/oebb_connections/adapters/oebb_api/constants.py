"""Constants for the ÖBB journey API adapter.

The API is an instance of hafas-rest-api with the ÖBB profile.
API Documentation: https://github.com/public-transport/hafas-rest-api
"""

OEBB_BASE_URL = "https://oebb.macistry.com/api"
JOURNEYS_PATH = "/journeys"

DEFAULT_RESULTS = 5

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Built-in station catalog: key -> (station id, display name)
DEFAULT_STATIONS = {
    "FLORIDSDORF": ("1292101", "Floridsdorf"),
    "WIEN_MITTE": ("1290302", "Wien Mitte"),
    "PRATERSTERN": ("1290201", "Praterstern"),
    "TRAISENGASSE": ("1292002", "Traisengasse"),
}

# Built-in routes: key -> (origin key, destination key, label, correlation station keys)
DEFAULT_ROUTES = {
    "f-m": ("FLORIDSDORF", "WIEN_MITTE", "F → M", ["PRATERSTERN"]),
    "m-f": ("WIEN_MITTE", "FLORIDSDORF", "M → F", []),
    "p-f": ("PRATERSTERN", "FLORIDSDORF", "P → F", []),
    "t-f": ("TRAISENGASSE", "FLORIDSDORF", "T → F", []),
}

# S-Bahn and REX only
DEFAULT_ADMISSIBLE_PRODUCTS = ("suburban", "regional")
