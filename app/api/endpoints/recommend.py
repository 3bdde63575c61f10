from fastapi import APIRouter, Depends

from app.api.deps import get_engine, get_recommendation_query
from app.models.book import Book, ErrorResponse
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation.targets import RecommendationQuery

router = APIRouter(tags=["recommendations"])


@router.get(
    "/recommend",
    response_model=list[Book],
    responses={400: {"model": ErrorResponse}},
)
async def recommend(
    query: RecommendationQuery = Depends(get_recommendation_query),
    engine: RecommendationEngine = Depends(get_engine),
):
    """
    Recommend books liked by users whose tastes overlap the requested books.

    Filters can be given as ?titles=A;B or ?title=A&title=B (same for authors and years).
    """
    return engine.recommend(query)
