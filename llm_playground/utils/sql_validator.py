"""
Read-only guard for model-written SQL.

The SQL QA graph runs whatever query the model writes, so the query is first
pulled out of any markdown fence and then checked to be one SELECT statement
(a leading WITH clause is fine) with no data or schema changing keyword.
"""
import re
from typing import List

import sqlparse
from sqlparse.sql import Statement
from sqlparse.tokens import Keyword

from llm_playground.exceptions import UnsafeQueryError
from llm_playground.utils.logger import logger

WRITE_KEYWORDS = frozenset({
    "ALTER", "ATTACH", "CREATE", "DELETE", "DETACH", "DROP", "EXEC", "INSERT",
    "MERGE", "PRAGMA", "REPLACE", "TRUNCATE", "UPDATE", "VACUUM",
})

_FENCE = re.compile(r"```(?:sql)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def _statements(sql: str) -> List[Statement]:
    return [statement for statement in sqlparse.parse(sql) if str(statement).strip()]


def extract_sql_query(full_text: str) -> str:
    """Return the fenced SQL block of a model answer, else its first statement."""
    fenced = _FENCE.search(full_text)
    if fenced:
        return fenced.group(1).strip()

    statements = _statements(full_text)
    return str(statements[0]).strip() if statements else ""


def is_read_only_select(query: str) -> bool:
    statements = _statements(query)
    if len(statements) != 1:
        logger.warning(f"[SQL] Expected one statement, got {len(statements)}")
        return False

    statement = statements[0]
    # get_type() looks past a WITH clause to the statement it introduces
    if statement.get_type() != "SELECT":
        logger.warning(f"[SQL] Not a SELECT statement: {statement.get_type()}")
        return False

    writes = {
        token.normalized for token in statement.flatten()
        if token.ttype in Keyword and token.normalized in WRITE_KEYWORDS
    }
    if writes:
        logger.error(f"[SQL] Write keywords in query: {sorted(writes)}")
        return False
    return True


def ensure_read_only(query: str) -> str:
    """Return the cleaned query, or raise UnsafeQueryError when it could write."""
    cleaned = extract_sql_query(query) or query.strip()
    if not is_read_only_select(cleaned):
        raise UnsafeQueryError(cleaned)
    return cleaned
