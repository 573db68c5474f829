"""Shared JSON file helpers for the stores."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict

from ..utils.exceptions import StorageError


def read_json(path: Path) -> Dict[str, Any]:
    """Load a JSON object; a missing file is an empty store."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise StorageError(f"Failed to load {path}: {e}")
    if not isinstance(data, dict):
        raise StorageError(f"Unexpected content in {path}")
    return data


def atomic_write(path: Path, payload: Dict[str, Any]) -> None:
    """Atomically write JSON to the target path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w", dir=str(path.parent), delete=False, encoding="utf-8"
    ) as tf:
        json.dump(payload, tf, indent=2, ensure_ascii=False, default=str)
        temp_path = Path(tf.name)
    try:
        shutil.move(str(temp_path), str(path))
    except Exception as e:
        if temp_path.exists():
            temp_path.unlink()
        raise StorageError(f"Failed to save {path}: {e}")
