"""Squadron and service configuration constants."""

# Squadron size
MIN_SQUADRON_SIZE = 4
MAX_SQUADRON_SIZE = 16

# Rarity limits (ships per squadron carrying the same upgrade)
MAX_RARE_CARRIERS = 1
MAX_UNCOMMON_CARRIERS = 3

# Non-breaking space for card and sheet exports
NBSP = "\u00a0"

# HTTP API
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 9000
