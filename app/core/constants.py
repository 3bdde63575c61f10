"""
Core constants used across the application. Keep these simple and documented.
"""

HEALTHY_MESSAGE: str = "Healthy"

# Error messages returned by /recommend
MISSING_FILTER_MESSAGE: str = "At least one 'title', 'author', or 'year' query parameter is required"
NO_TARGET_BOOKS_MESSAGE: str = "No valid books found based on the provided query parameters"

# Shard file patterns inside DATA_DIR
BOOKS_FILE_PATTERN: str = "books_*.json"
RATINGS_FILE_PATTERN: str = "ratings_*.json"
