from app.core.constants import MISSING_FILTER_MESSAGE, NO_TARGET_BOOKS_MESSAGE


class RecommendationError(Exception):
    """Base error for requests the recommendation engine refuses to serve."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFilterError(RecommendationError):
    def __init__(self, message: str = MISSING_FILTER_MESSAGE):
        super().__init__(message)


class NoTargetBooksError(RecommendationError):
    def __init__(self, message: str = NO_TARGET_BOOKS_MESSAGE):
        super().__init__(message)


class DataLoadError(Exception):
    """Raised when the catalog or rating shards cannot be read."""
