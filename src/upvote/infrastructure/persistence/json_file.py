"""File helpers shared by the JSON-backed repositories."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from upvote.domain.exceptions import FetchError


def read_json(file_path: Path) -> Any:
    """Load *file_path*; I/O and decoding problems become FetchError."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FetchError(f"Data file not found: {file_path}") from exc
    except OSError as exc:
        raise FetchError(f"Cannot read {file_path}: {exc}") from exc

    try:
        return json.loads(text)
    except ValueError as exc:
        raise FetchError(f"Invalid JSON in {file_path}: {exc}") from exc
