"""Integration tests for the Bookshelf API."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_engine, get_snapshot
from app.core.app import app
from app.core.constants import MISSING_FILTER_MESSAGE, NO_TARGET_BOOKS_MESSAGE
from tests.conftest import BASE

# ── Health ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Healthy"}


@pytest.mark.asyncio
async def test_privacy_policy(client: AsyncClient):
    resp = await client.get("/privacy-policy")
    assert resp.status_code == 200
    assert resp.json() == {"message": "This is the privacy policy, we store no data"}


# ── Books ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_titles_in_catalog_order(client: AsyncClient, books):
    resp = await client.get("/books")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == len(books)
    assert data == [book.Title for book in books]


@pytest.mark.asyncio
async def test_get_book_by_exact_title(client: AsyncClient):
    resp = await client.get("/book", params={"title": "Dune"})
    assert resp.status_code == 200
    assert resp.json() == {
        "ISBN": "1",
        "Title": "Dune",
        "Author": "Frank Herbert",
        "Year": 1965,
        "Publisher": "Test Press",
        "SmallImage": "http://img.test/1-s.jpg",
        "MedImage": "http://img.test/1-m.jpg",
        "LgImage": "http://img.test/1-l.jpg",
    }


@pytest.mark.asyncio
async def test_get_book_is_case_sensitive(client: AsyncClient):
    resp = await client.get("/book", params={"title": "dune"})
    assert resp.status_code == 200
    assert resp.json() is None


@pytest.mark.asyncio
async def test_get_book_without_title(client: AsyncClient):
    resp = await client.get("/book")
    assert resp.status_code == 200
    assert resp.json() is None


# ── Recommendations ────────────────────────────────


def _isbns(resp) -> list[str]:
    return [book["ISBN"] for book in resp.json()]


@pytest.mark.asyncio
async def test_recommend_requires_a_filter(client: AsyncClient):
    resp = await client.get("/recommend")
    assert resp.status_code == 400
    assert resp.json() == {"error": MISSING_FILTER_MESSAGE}


@pytest.mark.asyncio
async def test_recommend_unknown_title(client: AsyncClient):
    resp = await client.get("/recommend", params={"title": "NonexistentBook123"})
    assert resp.status_code == 400
    assert resp.json() == {"error": NO_TARGET_BOOKS_MESSAGE}


@pytest.mark.asyncio
@pytest.mark.parametrize("qs", ["title=", "year=", "titles=;", "titles=%20", "author="])
async def test_recommend_blank_filter_matches_nothing(client: AsyncClient, qs: str):
    # A filter given without a value still counts as given
    resp = await client.get(f"/recommend?{qs}")
    assert resp.status_code == 400
    assert resp.json() == {"error": NO_TARGET_BOOKS_MESSAGE}


@pytest.mark.asyncio
async def test_recommend_non_numeric_year_matches_nothing(client: AsyncClient):
    resp = await client.get("/recommend", params={"year": "abc"})
    assert resp.status_code == 400
    assert resp.json() == {"error": NO_TARGET_BOOKS_MESSAGE}


@pytest.mark.asyncio
async def test_recommend_by_title(client: AsyncClient):
    resp = await client.get("/recommend", params={"title": "Dune"})
    assert resp.status_code == 200
    # Neuromancer is liked by two similar users, so it beats Foundation's higher average
    assert _isbns(resp) == ["3", "7", "11"]
    assert resp.json()[0]["Title"] == "Neuromancer"


@pytest.mark.asyncio
async def test_recommend_title_is_case_insensitive(client: AsyncClient):
    resp = await client.get("/recommend", params={"title": "dUNE"})
    assert resp.status_code == 200
    assert _isbns(resp) == ["3", "7", "11"]


@pytest.mark.asyncio
async def test_recommend_delimited_titles_skip_unknown(client: AsyncClient):
    resp = await client.get("/recommend", params={"titles": "Dune; Dune Messiah ;Nope"})
    assert resp.status_code == 200
    assert _isbns(resp) == ["3", "7", "11"]


@pytest.mark.asyncio
async def test_recommend_delimited_form_wins_over_repeated(client: AsyncClient):
    resp = await client.get("/recommend?titles=Dune&title=NonexistentBook123")
    assert resp.status_code == 200
    assert _isbns(resp) == ["3", "7", "11"]


@pytest.mark.asyncio
async def test_recommend_repeated_titles(client: AsyncClient):
    resp = await client.get("/recommend?title=Dune&title=Dune%20Messiah")
    assert resp.status_code == 200
    assert _isbns(resp) == ["3", "7", "11"]


@pytest.mark.asyncio
async def test_recommend_by_author_ignores_case_and_punctuation(client: AsyncClient):
    resp = await client.get("/recommend", params={"author": "FRANK HERBERT!"})
    assert resp.status_code == 200
    assert _isbns(resp) == ["3", "7", "11"]


@pytest.mark.asyncio
async def test_recommend_without_similar_users_is_empty(client: AsyncClient):
    # Nobody rated the Rowling books, so no user overlaps the target set
    resp = await client.get("/recommend", params={"authors": "jk rowling"})
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_recommend_year_filter_restricts_decade(client: AsyncClient):
    # Similar users only like books outside the 1980s
    resp = await client.get("/recommend", params={"title": "Dune", "year": "1980"})
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_recommend_never_returns_targets(client: AsyncClient):
    resp = await client.get("/recommend", params={"titles": "Dune;Neuromancer"})
    assert resp.status_code == 200
    assert not {"1", "3"} & set(_isbns(resp))
    assert len(resp.json()) <= 10


@pytest.mark.asyncio
async def test_recommend_is_repeatable(client: AsyncClient):
    params = {"authors": "Frank Herbert;William Gibson", "years": "1969"}
    first = await client.get("/recommend", params=params)
    second = await client.get("/recommend", params=params)
    assert first.status_code == 200
    assert first.json() == second.json()


# ── Errors ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_unexpected_error_returns_json_500(snapshot):
    def broken_engine():
        raise RuntimeError("engine exploded")

    app.dependency_overrides[get_snapshot] = lambda: snapshot
    app.dependency_overrides[get_engine] = broken_engine
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url=BASE) as c:
            resp = await c.get("/recommend", params={"title": "Dune"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
