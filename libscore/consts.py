from datetime import timedelta

DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)

# Combined popularity weights (subscribers*50 + forks*25 + stars*10 + downloads/100)
SUBSCRIBER_WEIGHT = 50
FORK_WEIGHT = 25
STAR_WEIGHT = 10
DOWNLOADS_DIVISOR = 100

# Combined popularity tiers
VERY_POPULAR_THRESHOLD = 50_000
POPULAR_THRESHOLD = 10_000
KNOWN_THRESHOLD = 2_500

LOTS_OF_ISSUES_THRESHOLD = 75
RECENTLY_UPDATED_DAYS = 30  # Roughly 1 month
NOT_UPDATED_RECENTLY_DAYS = 180  # Roughly 6 months

# License key prefixes treated as restrictive
RESTRICTIVE_LICENSE_PREFIXES = ("gpl", "other")

# Trending score for libraries without download data
NO_DOWNLOADS_POPULARITY = -100

# CLI score colour bands
SCORE_GOOD = 70
SCORE_FAIR = 50
