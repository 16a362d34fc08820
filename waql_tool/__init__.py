"""
WAQL Tool

Run WAQL queries against a running Wwise instance and get the results back
as a table.

Example:
    from waql_tool import QueryExecutor, export_csv

    executor = QueryExecutor()
    outcome = executor.execute("$ from type Sound | name id path")

    if outcome.ok and outcome.table is not None:
        for row in outcome.table:
            print(row["name"], row["path"])
        export_csv(outcome.table, "sounds.csv")
    elif not outcome.ok:
        print(outcome.message)
"""

from .client import WaapiClient
from .executor import QueryExecutor, execute
from .exporter import export, export_csv, to_csv_text
from .models import QueryRequest, Table, Success, Failure, Outcome
from .normalizer import normalize, stringify
from .splitter import split
from .exceptions import (
    WaqlToolError,
    EmptyQueryError,
    TransportError,
    SendFailedError,
    InvalidResponseBodyError,
    NotAnObjectError,
    ServiceError,
    ExportError,
    WriteFailedError
)

__version__ = "0.1.0"
__all__ = [
    "WaapiClient",
    "QueryExecutor",
    "execute",
    "export",
    "export_csv",
    "to_csv_text",
    "QueryRequest",
    "Table",
    "Success",
    "Failure",
    "Outcome",
    "normalize",
    "stringify",
    "split",
    # Errors
    "WaqlToolError",
    "EmptyQueryError",
    "TransportError",
    "SendFailedError",
    "InvalidResponseBodyError",
    "NotAnObjectError",
    "ServiceError",
    "ExportError",
    "WriteFailedError",
]
