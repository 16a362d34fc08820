"""
Query Splitter

Separates raw input into the WAQL clause and the optional list of return
fields. The syntax is ``<clause> | <field> <field> ...``:

    $ from type Sound                 -> clause only
    $ from type Sound | name id       -> clause + ["name", "id"]

Only the first ``|`` is a delimiter. Any later ``|`` stays in the options
text and shows up as a literal token after whitespace splitting.
"""

from typing import List, Optional

from .exceptions import EmptyQueryError
from .models import QueryRequest

DELIMITER = "|"


def split_options(text: str) -> Optional[List[str]]:
    """Turn the options text into return field names, or None if blank."""
    text = text.strip()
    if not text:
        return None
    return text.split()


def split(raw: str) -> QueryRequest:
    """
    Split raw query text into a QueryRequest.

    Args:
        raw: Text as typed by the user

    Returns:
        QueryRequest with the trimmed clause and projection (or None)

    Raises:
        EmptyQueryError: If the input, or the clause before ``|``, is empty
    """
    text = (raw or "").strip()
    if not text:
        raise EmptyQueryError()

    clause, sep, options = text.partition(DELIMITER)
    if not sep:
        return QueryRequest(clause=text)

    clause = clause.strip()
    if not clause:
        raise EmptyQueryError()

    return QueryRequest(clause=clause, projection=split_options(options))
