from collections.abc import Iterable
from dataclasses import dataclass

from app.models.book import Book
from app.services.catalog import CatalogIndex
from app.services.ratings import RatingIndex


@dataclass
class Candidate:
    """A book liked by one or more similar users."""

    isbn: str
    count: int = 0
    total_rating: int = 0

    @property
    def avg_rating(self) -> float:
        return self.total_rating / self.count if self.count else 0.0

    def add(self, rating: int):
        self.count += 1
        self.total_rating += rating


class RecommendationAggregator:
    """
    Pools the books similar users rated highly and ranks them.

    Ranking: support count (how many similar users liked the book), then
    average rating among them, then ISBN.
    """

    def __init__(
        self,
        ratings: RatingIndex,
        catalog: CatalogIndex,
        recommend_threshold: int = 7,
        max_results: int = 10,
    ):
        self.ratings = ratings
        self.catalog = catalog
        self.recommend_threshold = recommend_threshold
        self.max_results = max_results

    def collect(self, user_ids: Iterable[str], targets: set[str]) -> dict[str, Candidate]:
        candidates: dict[str, Candidate] = {}
        for user_id in user_ids:
            for isbn, value in self.ratings.profile(user_id).items():
                if isbn in targets or value < self.recommend_threshold:
                    continue
                candidates.setdefault(isbn, Candidate(isbn)).add(value)
        return candidates

    @staticmethod
    def rank(candidates: Iterable[Candidate]) -> list[Candidate]:
        return sorted(candidates, key=lambda c: (-c.count, -c.avg_rating, c.isbn))

    def filter_by_decades(self, ranked: list[Candidate], decades: set[int]) -> list[Candidate]:
        """Keep candidates published in one of ``decades``. Books missing from the catalog are dropped."""
        kept = []
        for candidate in ranked:
            book = self.catalog.get(candidate.isbn)
            if book is not None and book.decade in decades:
                kept.append(candidate)
        return kept

    def aggregate(
        self,
        user_ids: Iterable[str],
        targets: set[str],
        decades: set[int] | None = None,
    ) -> list[Book]:
        """
        Build the final recommendation list.

        Args:
            user_ids: Similar users, most similar first
            targets: ISBNs the caller already asked about; never recommended
            decades: When the request filtered by year, the decades results must fall in

        Returns:
            Up to ``max_results`` catalog books
        """
        ranked = self.rank(self.collect(user_ids, targets).values())

        if decades is not None:
            ranked = self.filter_by_decades(ranked, decades)

        books = []
        for candidate in ranked[: self.max_results]:
            book = self.catalog.get(candidate.isbn)
            if book is not None:
                books.append(book)
        return books
