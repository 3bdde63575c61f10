from dataclasses import dataclass, field

from loguru import logger

from app.services.catalog import CatalogIndex
from app.shared.years import decades_of


@dataclass(frozen=True)
class RecommendationQuery:
    """Filter values for one /recommend request, already split and decoded."""

    titles: list[str] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    years: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.titles or self.authors or self.years)

    @property
    def decades(self) -> set[int]:
        return decades_of(self.years)


class TargetResolver:
    """Turns title, author and year filters into the set of ISBNs a caller is interested in."""

    def __init__(self, catalog: CatalogIndex):
        self.catalog = catalog

    def resolve(self, query: RecommendationQuery) -> set[str]:
        targets: set[str] = set()
        targets |= self.resolve_titles(query.titles)
        targets |= self.resolve_authors(query.authors)
        targets |= self.resolve_decades(query.years)
        return targets

    def resolve_titles(self, titles: list[str]) -> set[str]:
        found = set()
        for title in titles:
            isbn = self.catalog.isbn_for_title(title)
            if isbn:
                found.add(isbn)
            else:
                logger.warning(f"Title not found: {title}")
        return found

    def resolve_authors(self, authors: list[str]) -> set[str]:
        found: set[str] = set()
        for author in authors:
            isbns = self.catalog.isbns_for_author(author)
            if isbns:
                found |= isbns
            else:
                logger.warning(f"Author not found: {author}")
        return found

    def resolve_decades(self, years: list[str]) -> set[str]:
        """Every catalog book published in the same decade as any of ``years``."""
        if not years:
            return set()
        return self.catalog.isbns_in_decades(decades_of(years))
