from __future__ import annotations

import json
import logging
import shutil
import uuid
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def parse_object(text: str | bytes) -> dict[str, Any] | None:
    """
    Parse JSON text into a dict.

    Returns None for invalid JSON (including nesting too deep to decode) or
    when the top level is not an object.
    """
    try:
        raw = json.loads(text)
    except (TypeError, ValueError, RecursionError):
        return None
    return raw if isinstance(raw, dict) else None


def dump_object(doc: dict[str, Any]) -> str:
    # Compact, insertion ordered: {"volume":80,"muted":false}
    return json.dumps(doc, separators=(",", ":"), ensure_ascii=False)


def ensure_dir(path: Path) -> bool:
    """
    Create exactly `path` (no parents). Returns whether it exists afterwards.
    """
    try:
        path.mkdir(exist_ok=True)
    except OSError as e:
        logger.debug("could not create directory %s: %r", path, e)
    return path.is_dir()


def read_text(path: Path) -> str | None:
    """
    Read a whole file as text. A leading UTF-8 BOM is dropped.

    Returns None for missing or unreadable files.
    """
    try:
        return path.read_bytes().decode("utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("could not read %s: %r", path, e)
        return None


def atomic_write_text(path: Path, text: str) -> bool:
    """
    Atomically write text to disk by writing to a temp file then replacing.

    A symlinked target is written through, and an existing target keeps its
    permission bits. Returns False (and leaves no temp file behind) if any
    step fails.
    """
    target = path.resolve() if path.is_symlink() else path
    tmp_path = target.with_name(f".{target.name}.{uuid.uuid4().hex}.tmp")
    try:
        with tmp_path.open("xb") as f:
            f.write(text.encode("utf-8"))
        if target.exists():
            shutil.copymode(target, tmp_path)
        tmp_path.replace(target)
    except OSError as e:
        logger.debug("could not write %s: %r", path, e)
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.debug("could not remove temp file %s", tmp_path, exc_info=True)
        return False
    return True
