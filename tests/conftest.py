import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_snapshot
from app.core.app import app
from app.models.book import Book, Rating
from app.services.data_loader import build_snapshot

BASE = "http://test"

BOOKS = [
    ("1", "Dune", "Frank Herbert", 1965),
    ("2", "Dune Messiah", "Frank Herbert", 1969),
    ("3", "Neuromancer", "William Gibson", 1984),
    ("4", "Harry Potter and the Sorcerer's Stone", "J.K. Rowling", 1997),
    ("5", "Harry Potter and the Chamber of Secrets", "J.K. Rowling", 1998),
    ("6", "The Hobbit", "J.R.R. Tolkien", 1937),
    ("7", "Foundation", "Isaac Asimov", 1951),
    ("8", "Snow Crash", "Neal Stephenson", 1992),
    ("9", "The Diamond Age", "Neal Stephenson", 1995),
    ("10", "Hyperion", "Dan Simmons", 1989),
    ("11", "Ender's Game", "Orson Scott Card", 1985),
    ("12", "The Left Hand of Darkness", "Ursula K. Le Guin", 1969),
]

# Taste profiles (high rating >= 4, recommend-worthy >= 7):
#   u1 likes Dune, Neuromancer, Ender's Game
#   u2 likes Dune, Neuromancer; Hyperion only at 6
#   u3 likes Foundation; Dune only at 5
#   u4 likes Dune Messiah
#   u5 likes Snow Crash; Dune at 3 does not qualify
#   u6 rated nothing highly
RATINGS = [
    ("u1", "1", 9),
    ("u1", "3", 8),
    ("u1", "11", 7),
    ("u2", "1", 8),
    ("u2", "3", 9),
    ("u2", "10", 6),
    ("u3", "1", 5),
    ("u3", "7", 10),
    ("u4", "2", 9),
    ("u4", "3", 2),
    ("u5", "1", 3),
    ("u5", "8", 9),
    ("u6", "6", 2),
]


def make_book(isbn: str, title: str, author: str = "Unknown", year: int | None = 2000) -> Book:
    return Book(
        ISBN=isbn,
        Title=title,
        Author=author,
        Year=year,
        Publisher="Test Press",
        SmallImage=f"http://img.test/{isbn}-s.jpg",
        MedImage=f"http://img.test/{isbn}-m.jpg",
        LgImage=f"http://img.test/{isbn}-l.jpg",
    )


@pytest.fixture
def books() -> list[Book]:
    return [make_book(*row) for row in BOOKS]


@pytest.fixture
def ratings() -> list[Rating]:
    return [Rating(UserID=user, ISBN=isbn, Rating=value) for user, isbn, value in RATINGS]


@pytest.fixture
def snapshot(books, ratings):
    return build_snapshot(books, ratings)


@pytest.fixture
async def client(snapshot):
    app.dependency_overrides[get_snapshot] = lambda: snapshot
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    app.dependency_overrides.clear()
