"""
User-similarity recommendations over the static book catalog.

Pipeline: filters -> target ISBNs -> most similar users (Jaccard) -> pooled,
ranked and decade-filtered candidates.
"""

from app.services.recommendation.aggregator import Candidate, RecommendationAggregator
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation.similarity import SimilarityRanker, SimilarUser, jaccard_similarity
from app.services.recommendation.targets import RecommendationQuery, TargetResolver

__all__ = [
    "Candidate",
    "RecommendationAggregator",
    "RecommendationEngine",
    "RecommendationQuery",
    "SimilarUser",
    "SimilarityRanker",
    "TargetResolver",
    "jaccard_similarity",
]
