import re
from collections.abc import Iterable
from types import MappingProxyType

from app.models.book import Book

_NON_AUTHOR_CHARS = re.compile(r"[^a-z0-9 ]")


def normalize_author(name: str) -> str:
    """Lowercase, trim and drop everything but a-z, 0-9 and spaces.

    "J.K. Rowling" and "jk rowling" both become "jk rowling".
    """
    return _NON_AUTHOR_CHARS.sub("", name.lower().strip())


class CatalogIndex:
    """
    Read-only view over every book in the catalog with the lookups
    the API and the recommendation engine need.
    """

    def __init__(self, books: Iterable[Book]):
        self._books: tuple[Book, ...] = tuple(books)

        by_isbn: dict[str, Book] = {}
        by_title: dict[str, Book] = {}
        isbn_by_lower_title: dict[str, str] = {}
        isbns_by_author: dict[str, set[str]] = {}

        for book in self._books:
            by_isbn.setdefault(book.ISBN, book)
            # Exact lookup returns the first book carrying the title
            by_title.setdefault(book.Title, book)
            # Case-insensitive lookup keeps the last one
            isbn_by_lower_title[book.Title.lower()] = book.ISBN
            isbns_by_author.setdefault(normalize_author(book.Author), set()).add(book.ISBN)

        self._by_isbn = MappingProxyType(by_isbn)
        self._by_title = MappingProxyType(by_title)
        self._isbn_by_lower_title = MappingProxyType(isbn_by_lower_title)
        self._isbns_by_author = MappingProxyType({k: frozenset(v) for k, v in isbns_by_author.items()})

    def __len__(self) -> int:
        return len(self._books)

    def titles(self) -> list[str]:
        """All titles in catalog order, duplicates included."""
        return [book.Title for book in self._books]

    def find_by_title(self, title: str | None) -> Book | None:
        """Exact, case-sensitive title lookup."""
        if title is None:
            return None
        return self._by_title.get(title)

    def get(self, isbn: str) -> Book | None:
        return self._by_isbn.get(isbn)

    def isbn_for_title(self, title: str) -> str | None:
        """Case-insensitive title lookup."""
        if not title:
            return None
        return self._isbn_by_lower_title.get(title.lower())

    def isbns_for_author(self, author: str) -> frozenset[str]:
        key = normalize_author(author)
        if not key:
            return frozenset()
        return self._isbns_by_author.get(key, frozenset())

    def isbns_in_decades(self, decades: set[int]) -> set[str]:
        if not decades:
            return set()
        return {book.ISBN for book in self._books if book.decade in decades}
