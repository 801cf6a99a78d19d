"""JSON file helpers for config documents."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    """Encode the settings types json cannot handle natively.

    Models are dumped in JSON mode, so nested enums and paths come out as
    plain strings too. Anything else is a caller error.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return obj.as_posix()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def write_json(path: str | Path, obj: Any) -> None:
    """Write an object to a JSON file with pretty formatting.

    Args:
        path: Output file path; parent directories are created
        obj: Mapping that may contain pydantic models, enums or paths

    Raises:
        TypeError: If obj holds a value with no JSON form
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    path_obj.write_text(
        json.dumps(obj, indent=2, ensure_ascii=False, default=_json_default),
        encoding="utf-8",
    )
    logger.debug("Wrote JSON to %s", path_obj)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON file holding a single object.

    Raises:
        ValueError: If the file is not valid JSON or not an object
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
