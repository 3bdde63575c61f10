from urllib.parse import unquote


def split_delimited(raw: str, delimiter: str = ";") -> list[str]:
    """Split a delimiter-separated parameter into stripped, percent-decoded values.

    Blank segments are kept: "Dune;" yields ["Dune", ""]. They match no book.
    """
    return [unquote(token.strip()) for token in raw.split(delimiter)]


def collect_filter_values(
    delimited: str | None,
    repeated: list[str] | None,
    delimiter: str = ";",
) -> list[str]:
    """Normalize both query forms of a filter into one ordered list.

    The delimited form (e.g. ?titles=A;B) wins when it is present and non-empty,
    otherwise the repeated form (e.g. ?title=A&title=B) is used. A filter that
    was given but left blank (?title=) still counts as given.
    """
    if delimited:
        return split_delimited(delimited, delimiter)
    return list(repeated or [])
