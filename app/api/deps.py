from fastapi import Depends, Query, Request

from app.core.config import settings
from app.services.data_loader import LibrarySnapshot
from app.services.recommendation.engine import RecommendationEngine
from app.services.recommendation.targets import RecommendationQuery
from app.shared.query import collect_filter_values


def get_snapshot(request: Request) -> LibrarySnapshot:
    """Catalog and ratings loaded at startup."""
    return request.app.state.snapshot


def get_engine(snapshot: LibrarySnapshot = Depends(get_snapshot)) -> RecommendationEngine:
    return RecommendationEngine(snapshot)


def get_recommendation_query(
    titles: str | None = Query(default=None, description="Titles separated by ';'"),
    title: list[str] | None = Query(default=None, description="Repeatable single title"),
    authors: str | None = Query(default=None, description="Authors separated by ';'"),
    author: list[str] | None = Query(default=None, description="Repeatable single author"),
    years: str | None = Query(default=None, description="Years separated by ';'"),
    year: list[str] | None = Query(default=None, description="Repeatable single year"),
) -> RecommendationQuery:
    delimiter = settings.QUERY_DELIMITER
    return RecommendationQuery(
        titles=collect_filter_values(titles, title, delimiter),
        authors=collect_filter_values(authors, author, delimiter),
        years=collect_filter_values(years, year, delimiter),
    )
