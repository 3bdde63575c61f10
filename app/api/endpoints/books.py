from fastapi import APIRouter, Depends, Query

from app.api.deps import get_snapshot
from app.models.book import Book
from app.services.data_loader import LibrarySnapshot

router = APIRouter(tags=["books"])


@router.get("/books", response_model=list[str])
async def list_titles(snapshot: LibrarySnapshot = Depends(get_snapshot)):
    """Every title in the catalog, in catalog order."""
    return snapshot.catalog.titles()


@router.get("/book", response_model=Book | None)
async def get_book(
    title: str | None = Query(default=None, description="Exact, case-sensitive title"),
    snapshot: LibrarySnapshot = Depends(get_snapshot),
):
    """Return the first book whose title matches exactly, or null."""
    return snapshot.catalog.find_by_title(title)
