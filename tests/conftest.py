"""Shared fixtures for building Javadoc ZIP files on the fly."""

import logging
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest

# Keep log files written by the tool modules out of the working directory
os.environ.setdefault("JAVADOC_LOGS_DIR", tempfile.mkdtemp(prefix="javadoc-logs-"))


@pytest.fixture
def make_zip(tmp_path):
    """Return a function that writes a ZIP file from a dict of entry name -> content."""
    def _make_zip(entries: Dict[str, str], name: str = "library.zip", directory: Optional[Path] = None,
                  compression: int = zipfile.ZIP_STORED) -> Path:
        path = (directory or tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w", compression=compression) as zf:
            for entry, content in entries.items():
                zf.writestr(entry, content)
        return path
    return _make_zip


@pytest.fixture
def logger() -> logging.Logger:
    logger = logging.getLogger("test.javadoc")
    logger.setLevel(logging.DEBUG)
    return logger
