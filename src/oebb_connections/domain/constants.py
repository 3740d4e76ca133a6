"""Domain-wide defaults."""

# Words that add nothing to a Vienna direction sign ("Wien Floridsdorf Bahnhof" -> "Floridsdorf")
DEFAULT_BOILERPLATE_TOKENS = (
    "bahnhof",
    "station",
    "Wien",
    "hbf",
    "Bahnhst",
    "im Weinviertel",
)
