"""
WAQL Tool Data Models
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass
class QueryRequest:
    """A WAQL clause plus the optional list of fields to return."""
    clause: str
    projection: Optional[List[str]] = None

    def __iter__(self):
        return iter((self.clause, self.projection))

    def args(self) -> Dict[str, Any]:
        return {"waql": self.clause}

    def options(self) -> Dict[str, Any]:
        if self.projection is None:
            return {}
        return {"return": list(self.projection)}


@dataclass
class Table:
    """
    Column-stable view of a heterogeneous result set.

    Columns keep first-seen order across all rows. Every row holds a string
    for every column; columns an object did not carry are empty strings.
    """
    columns: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)

    def value(self, index: int, column: str) -> str:
        """Get a cell, returning empty string for a column the row lacks."""
        return self.rows[index].get(column, "")

    def to_records(self) -> List[Dict[str, str]]:
        """Return rows as list of dictionaries."""
        return self.rows

    def to_tuples(self) -> List[tuple]:
        """Return rows as tuples in column order."""
        return [tuple(row.get(c, "") for c in self.columns) for row in self.rows]

    def to_dataframe(self):
        """
        Convert the table to a pandas DataFrame.

        Requires pandas to be installed.
        """
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for to_dataframe(). "
                "Install it with: pip install waql-tool[pandas]"
            )

        return pd.DataFrame(self.to_tuples(), columns=self.columns)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Dict[str, str]]:
        return iter(self.rows)

    def __getitem__(self, index):
        return self.rows[index]


@dataclass
class Success:
    """Outcome of a query that reached the service and came back."""
    raw_text: str
    table: Optional[Table] = None
    count: int = 0

    ok = True

    @property
    def status_message(self) -> str:
        if self.table is None:
            return ""
        return f"Query successful - {self.count} result(s)"


@dataclass
class Failure:
    """Outcome of a query that failed at some stage."""
    message: str
    stage: str = ""

    ok = False

    @property
    def status_message(self) -> str:
        return "Query failed"


Outcome = Union[Success, Failure]
