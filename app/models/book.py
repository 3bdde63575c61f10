from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from app.shared.years import decade_of, parse_year


class Book(BaseModel):
    """Catalog record, serialized with the same keys as the source data."""

    model_config = ConfigDict(frozen=True)

    ISBN: str
    Title: str
    Author: str = ""
    Year: int | None = None
    Publisher: str = ""
    SmallImage: str = ""
    MedImage: str = ""
    LgImage: str = ""

    @field_validator("ISBN", mode="before")
    @classmethod
    def _isbn_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @field_validator("Title", "Author", "Publisher", "SmallImage", "MedImage", "LgImage", mode="before")
    @classmethod
    def _text_as_str(cls, value: Any) -> Any:
        # Numeric titles ("1984") and missing authors show up in the shards
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("Year", mode="before")
    @classmethod
    def _lenient_year(cls, value: Any) -> int | None:
        # Source data mixes ints, numeric strings and the odd publisher name
        return parse_year(value)

    @property
    def decade(self) -> int | None:
        return decade_of(self.Year)


class Rating(BaseModel):
    """A single user's score for a book. Never returned by the API."""

    model_config = ConfigDict(frozen=True)

    UserID: str
    ISBN: str
    Rating: int

    @field_validator("UserID", "ISBN", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class ErrorResponse(BaseModel):
    error: str


class MessageResponse(BaseModel):
    message: str
