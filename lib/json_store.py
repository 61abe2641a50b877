# =============================================================================
# lib/json_store.py - JSON Backing File Adapter
# =============================================================================
# This module wraps the single JSON document that holds the product catalog.
# The whole document is read on every request and rewritten on every change:
# - read_all(): parse the file into a list of raw product records
# - write_all(): replace the file contents with a new list of records
#
# Errors are raised as JsonStoreError with a machine-readable code, so the
# service layer can decide how to surface them.
#
# Usage:
#   from lib.json_store import JsonProductStore
#   store = JsonProductStore(Path("data/products.json"))
#   records = store.read_all()
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

# Set up logging for this module
logger = logging.getLogger(__name__)


class JsonStoreError(Exception):
    """
    Error while reading or writing the backing file.

    Carries a code describing what went wrong and a suggestion for fixing it.
    """

    def __init__(
        self,
        message: str,
        code: str = "JSON_STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class JsonProductStore:
    """
    File-backed storage for product records.

    The file holds one JSON array. Records are returned as plain dicts in
    file order; validation is left to the caller.

    Example:
        store = JsonProductStore(settings.DATA_FILE)
        with store.lock:
            records = store.read_all()
            records.append({"id": 3, "name": "Pen", "price": 10})
            store.write_all(records)
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        # Serializes read-modify-write cycles inside one process only
        self.lock = threading.Lock()

    def exists(self) -> bool:
        """Check whether the backing file is present."""
        return self.path.is_file()

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    def read_all(self) -> list[dict[str, Any]]:
        """
        Read every record from the backing file.

        Returns:
            List of raw product records, in file order

        Raises:
            JsonStoreError: If the file is missing, unreadable, not valid JSON,
                or does not contain a JSON array
        """
        path_str = str(self.path)

        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            raise JsonStoreError(
                message=f"Data file not found: {path_str}",
                code="FILE_NOT_FOUND",
                suggestion="Create the file or run scripts/seed_products.py",
                details={"path": path_str},
            )
        except json.JSONDecodeError as e:
            raise JsonStoreError(
                message=f"Data file is not valid JSON: {e}",
                code="PARSE_FAILED",
                suggestion="Fix or restore the data file contents",
                details={"path": path_str, "line": e.lineno, "column": e.colno},
            )
        except (OSError, UnicodeDecodeError) as e:
            raise JsonStoreError(
                message=f"Failed to read data file: {e}",
                code="READ_FAILED",
                suggestion="Check the file permissions and encoding",
                details={"path": path_str},
            )

        if not isinstance(document, list):
            raise JsonStoreError(
                message="Data file must contain a JSON array",
                code="INVALID_DOCUMENT",
                suggestion="Wrap the product records in a top-level array",
                details={"path": path_str, "found": type(document).__name__},
            )

        logger.debug(f"Read {len(document)} records from {path_str}")
        return document

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def write_all(self, records: list[dict[str, Any]]) -> None:
        """
        Replace the backing file with the given records.

        The new document is written to a temporary file in the same directory
        and moved over the old one, so readers never see a half-written file.

        Args:
            records: Full list of product records to persist

        Raises:
            JsonStoreError: If the file cannot be written
        """
        path_str = str(self.path)
        payload = json.dumps(records, ensure_ascii=False, indent=2)
        tmp_name = None

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise JsonStoreError(
                message=f"Failed to write data file: {e}",
                code="WRITE_FAILED",
                suggestion="Check that the data directory exists and is writable",
                details={"path": path_str},
            )
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug(f"Wrote {len(records)} records to {path_str}")
