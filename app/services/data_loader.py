"""
Startup loader for the static catalog and ratings.

Both datasets are stored as sharded JSON arrays (books_1.json, books_2.json, ...)
and concatenated in shard order into one immutable snapshot.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from app.core.constants import BOOKS_FILE_PATTERN, RATINGS_FILE_PATTERN
from app.core.exceptions import DataLoadError
from app.models.book import Book, Rating
from app.services.catalog import CatalogIndex
from app.services.ratings import RatingIndex

_SHARD_NUMBER = re.compile(r"_(\d+)\.json$")

_books_adapter = TypeAdapter(list[Book])
_ratings_adapter = TypeAdapter(list[Rating])


@dataclass(frozen=True)
class LibrarySnapshot:
    """Catalog and ratings shared read-only by every request."""

    catalog: CatalogIndex
    ratings: RatingIndex


def _shard_key(path: Path) -> tuple[int, str]:
    match = _SHARD_NUMBER.search(path.name)
    return (int(match.group(1)) if match else 0, path.name)


def find_shards(data_dir: Path, pattern: str) -> list[Path]:
    """Shard files matching ``pattern`` ordered by their numeric suffix."""
    return sorted(data_dir.glob(pattern), key=_shard_key)


def _read_shard(path: Path) -> list:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Failed to read {path}: {e}") from e
    if not isinstance(data, list):
        raise DataLoadError(f"{path} must contain a JSON array, got {type(data).__name__}")
    return data


def load_books(data_dir: Path) -> list[Book]:
    books: list[Book] = []
    for path in find_shards(data_dir, BOOKS_FILE_PATTERN):
        try:
            books.extend(_books_adapter.validate_python(_read_shard(path)))
        except ValidationError as e:
            raise DataLoadError(f"Invalid book record in {path}: {e}") from e
    return books


def load_ratings(data_dir: Path) -> list[Rating]:
    ratings: list[Rating] = []
    for path in find_shards(data_dir, RATINGS_FILE_PATTERN):
        try:
            ratings.extend(_ratings_adapter.validate_python(_read_shard(path)))
        except ValidationError as e:
            raise DataLoadError(f"Invalid rating record in {path}: {e}") from e
    return ratings


def build_snapshot(books: list[Book], ratings: list[Rating]) -> LibrarySnapshot:
    return LibrarySnapshot(catalog=CatalogIndex(books), ratings=RatingIndex(ratings))


def load_snapshot(data_dir: Path) -> LibrarySnapshot:
    """Read every shard under ``data_dir`` and build the shared snapshot."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataLoadError(f"Data directory not found: {data_dir}")

    snapshot = build_snapshot(load_books(data_dir), load_ratings(data_dir))
    logger.info(
        f"Loaded {len(snapshot.catalog)} books and {snapshot.ratings.rating_count} ratings "
        f"from {len(snapshot.ratings)} users ({data_dir})"
    )
    return snapshot
