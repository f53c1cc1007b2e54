"""Small file helpers shared by the credential and cache stores."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any, Optional


def read_text_if_exists(path: Path) -> Optional[str]:
    """Return the file contents, or ``None`` when the file does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_json_atomic(path: Path, payload: Any) -> None:
    """Write ``payload`` as pretty JSON via a temp file renamed over ``path``."""
    content = json.dumps(payload, ensure_ascii=False, indent=2)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}_", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with open(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def remove_if_exists(path: Path) -> bool:
    """Delete ``path``; return ``False`` if there was nothing to delete."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


__all__ = ["read_text_if_exists", "remove_if_exists", "write_json_atomic"]
