"""
Query Executor

Runs one query through the whole pipeline:

    raw text -> split -> WAAPI call -> normalize -> Success

A failure at any stage short-circuits to a Failure whose message is
prefixed with the stage (``query``, ``transport``, ``service``), so
nothing is raised across this boundary.
"""

import json
import logging
from typing import Any, Dict

from .client import WaapiClient
from .exceptions import WaqlToolError
from .models import Failure, Outcome, Success
from .normalizer import normalize
from .splitter import split

logger = logging.getLogger(__name__)


def pretty_json(result: Dict[str, Any]) -> str:
    """Format a result for display."""
    return json.dumps(result, indent=2, ensure_ascii=False)


class QueryExecutor:
    """
    Executes WAQL queries typed by a user.

    Example:
        executor = QueryExecutor()
        outcome = executor.execute("$ from type Sound | name id")
        if outcome.ok:
            print(outcome.raw_text)
    """

    def __init__(self, client: WaapiClient = None):
        self.client = client or WaapiClient()

    def execute(self, raw_input: str) -> Outcome:
        """
        Execute a query.

        Args:
            raw_input: Query text, optionally followed by ``| field field ...``

        Returns:
            Success with the pretty-printed result, the table (if the result
            has one) and its row count; or Failure with a stage-tagged message
        """
        try:
            request = split(raw_input)
            logger.debug("Executing WAQL: %s (return: %s)", request.clause, request.projection)

            result = self.client.query(request.clause, request.projection)
        except WaqlToolError as e:
            logger.warning("Query failed at %s stage: %s", e.stage, e)
            return Failure(message=e.tagged(), stage=e.stage)

        raw_text = pretty_json(result)
        table = normalize(result)
        count = len(table) if table is not None else 0
        logger.debug("Query returned %d row(s)", count)

        return Success(raw_text=raw_text, table=table, count=count)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def execute(raw_input: str) -> Outcome:
    """Execute a query with a default client."""
    with QueryExecutor() as executor:
        return executor.execute(raw_input)
