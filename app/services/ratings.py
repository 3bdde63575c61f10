from collections.abc import Iterable, Iterator
from types import MappingProxyType

from app.models.book import Rating


class RatingIndex:
    """
    Ratings reshaped into per-user profiles: user id -> {isbn: rating}.

    A user rating the same ISBN twice keeps the last value seen.
    """

    def __init__(self, ratings: Iterable[Rating]):
        profiles: dict[str, dict[str, int]] = {}
        total = 0
        for rating in ratings:
            profiles.setdefault(rating.UserID, {})[rating.ISBN] = rating.Rating
            total += 1

        self._total = total
        self._profiles = MappingProxyType({user: MappingProxyType(books) for user, books in profiles.items()})

    def __len__(self) -> int:
        """Number of distinct users."""
        return len(self._profiles)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._profiles

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    @property
    def rating_count(self) -> int:
        """Number of rating records read, duplicates included."""
        return self._total

    def profile(self, user_id: str) -> MappingProxyType:
        return self._profiles.get(user_id, MappingProxyType({}))

    def rated_at_least(self, user_id: str, threshold: int) -> set[str]:
        """ISBNs the user rated at or above ``threshold``."""
        return {isbn for isbn, value in self.profile(user_id).items() if value >= threshold}
