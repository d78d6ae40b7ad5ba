from __future__ import annotations

import os
import sqlite3
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from langgraph.checkpoint.memory import MemorySaver

from llm_playground.utils.logger import logger


def _ensure_dir(path: str) -> None:
    """Ensure the directory for a file path exists."""
    directory = os.path.dirname(os.path.abspath(path))
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def _backend() -> str:
    return (os.environ.get("LANGGRAPH_CHECKPOINTER", "memory") or "memory").lower()


def _sqlite_path() -> str:
    db_path = os.environ.get("LANGGRAPH_SQLITE_PATH", "./data/langgraph.sqlite")
    _ensure_dir(db_path)
    return db_path


# Global checkpointer instance (singleton)
_checkpointer_instance: Optional[Any] = None


def _build_checkpointer() -> Any:
    """Build the LangGraph checkpointer selected by environment configuration.

    Supported values for LANGGRAPH_CHECKPOINTER:
      - "memory" (default): in-process MemorySaver
      - "sqlite": sqlite-backed saver at LANGGRAPH_SQLITE_PATH (default ./data/langgraph.sqlite)
    """
    backend = _backend()

    logger.info(f"[Checkpointer] Initializing with backend: {backend}")

    if backend == "sqlite":
        try:
            from langgraph.checkpoint.sqlite import SqliteSaver
        except ImportError as e:
            logger.error("langgraph-checkpoint-sqlite not installed")
            raise RuntimeError(
                "LangGraph sqlite checkpointer not available. Install 'langgraph-checkpoint-sqlite'."
            ) from e

        db_path = _sqlite_path()
        logger.info(f"[Checkpointer] Creating SQLite checkpointer at {db_path}")
        return SqliteSaver(sqlite3.connect(db_path, check_same_thread=False))

    if backend != "memory":
        logger.warning(f"[Checkpointer] Unknown backend '{backend}', falling back to memory")

    logger.info("[Checkpointer] Creating in-memory checkpointer")
    return MemorySaver()


def new_checkpointer() -> Any:
    """Return a fresh in-memory checkpointer for a demo that needs isolated memory."""
    return MemorySaver()


def get_checkpointer() -> Any:
    """Return the process-wide checkpointer, creating it on first use."""
    global _checkpointer_instance

    # Return cached instance if available
    if _checkpointer_instance is not None:
        return _checkpointer_instance

    _checkpointer_instance = _build_checkpointer()
    return _checkpointer_instance


@asynccontextmanager
async def async_checkpointer() -> AsyncIterator[Any]:
    """Yield a checkpointer usable from ``astream``/``ainvoke``.

    The sqlite backend opens an ``AsyncSqliteSaver`` for the duration of the
    block, since ``SqliteSaver`` has no async methods. Other backends yield
    the process-wide checkpointer.
    """
    if _backend() != "sqlite":
        yield get_checkpointer()
        return

    try:
        from langgraph.checkpoint.sqlite.aio import AsyncSqliteSaver
    except ImportError as e:
        logger.error("langgraph-checkpoint-sqlite not installed for async")
        raise RuntimeError(
            "LangGraph async sqlite checkpointer not available. "
            "Install 'langgraph-checkpoint-sqlite' and 'aiosqlite'."
        ) from e

    db_path = _sqlite_path()
    logger.info(f"[Checkpointer] Opening async SQLite checkpointer at {db_path}")
    async with AsyncSqliteSaver.from_conn_string(db_path) as saver:
        yield saver


def reset_checkpointer() -> None:
    """Reset the global checkpointer instance.

    This is useful for testing or when switching configurations.
    """
    global _checkpointer_instance
    _checkpointer_instance = None
    logger.info("[Checkpointer] Global instance reset")
