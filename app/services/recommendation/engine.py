from loguru import logger

from app.core.config import settings
from app.core.exceptions import MissingFilterError, NoTargetBooksError
from app.models.book import Book
from app.services.data_loader import LibrarySnapshot
from app.services.recommendation.aggregator import RecommendationAggregator
from app.services.recommendation.similarity import SimilarityRanker
from app.services.recommendation.targets import RecommendationQuery, TargetResolver


class RecommendationEngine:
    """
    Main orchestration logic for user-similarity recommendations.
    Holds no state beyond the shared read-only snapshot.
    """

    def __init__(
        self,
        snapshot: LibrarySnapshot,
        high_rating_threshold: int | None = None,
        recommend_threshold: int | None = None,
        top_users: int | None = None,
        max_results: int | None = None,
    ):
        self.snapshot = snapshot
        self.resolver = TargetResolver(snapshot.catalog)
        self.ranker = SimilarityRanker(
            snapshot.ratings,
            high_rating_threshold=(
                high_rating_threshold if high_rating_threshold is not None else settings.HIGH_RATING_THRESHOLD
            ),
            top_n=top_users if top_users is not None else settings.TOP_SIMILAR_USERS,
        )
        self.aggregator = RecommendationAggregator(
            snapshot.ratings,
            snapshot.catalog,
            recommend_threshold=(
                recommend_threshold if recommend_threshold is not None else settings.RECOMMEND_RATING_THRESHOLD
            ),
            max_results=max_results if max_results is not None else settings.MAX_RECOMMENDATIONS,
        )

    def recommend(self, query: RecommendationQuery) -> list[Book]:
        """User-similarity pipeline.

        Raises:
            MissingFilterError: no title, author or year was given
            NoTargetBooksError: the filters matched no catalog book
        """
        if query.is_empty():
            raise MissingFilterError()

        logger.debug(f"Title List: {query.titles}")
        logger.debug(f"Author List: {query.authors}")
        logger.debug(f"Year List: {query.years}")

        # 1. Target set
        targets = self.resolver.resolve(query)
        if not targets:
            raise NoTargetBooksError()

        # 2. Most similar users
        similar_users = self.ranker.rank(targets)
        logger.debug(f"Resolved {len(targets)} target books, {len(similar_users)} similar users")

        # 3. Aggregate, restricting to the requested decades when years were given
        decades = query.decades if query.years else None
        books = self.aggregator.aggregate([u.user_id for u in similar_users], targets, decades)

        logger.debug(f"Returning {len(books)} recommendations")
        return books
