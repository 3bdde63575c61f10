from typing import Any, NamedTuple

from app.services.ratings import RatingIndex


class SimilarUser(NamedTuple):
    user_id: str
    similarity: float


def jaccard_similarity(set_a: set[Any], set_b: set[Any]) -> float:
    """Calculate Jaccard similarity between two sets."""
    if not set_a or not set_b:
        return 0.0

    intersection = len(set_a & set_b)
    union = len(set_a | set_b)
    return intersection / union if union > 0 else 0.0


class SimilarityRanker:
    """
    Finds the users whose highly-rated books overlap most with the target set.

    A user's qualifying set is every ISBN they rated at or above
    ``high_rating_threshold``; users without one are skipped.
    """

    def __init__(self, ratings: RatingIndex, high_rating_threshold: int = 4, top_n: int = 5):
        self.ratings = ratings
        self.high_rating_threshold = high_rating_threshold
        self.top_n = top_n

    def rank(self, targets: set[str]) -> list[SimilarUser]:
        scored: list[SimilarUser] = []
        for user_id in self.ratings:
            qualifying = self.ratings.rated_at_least(user_id, self.high_rating_threshold)
            if not qualifying:
                continue

            similarity = jaccard_similarity(targets, qualifying)
            if similarity > 0:
                scored.append(SimilarUser(user_id, similarity))

        # Ties fall back to user id so repeated queries rank identically
        scored.sort(key=lambda u: (-u.similarity, u.user_id))
        return scored[: self.top_n]
