"""Open freshly downloaded files in a viewer.

The sweep reports new items without their extension (it is only known once
the asset URL was found), so the actual file is looked up next to it.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


def resolve_item(save_root: str | os.PathLike, item: str) -> Optional[Path]:
    """Find `<save_root>/<item>.<ext>`; None when no such file exists."""
    base = Path(save_root) / item
    matches = sorted(
        p for p in base.parent.glob(base.name + ".*") if not p.name.endswith(".part")
    )
    return matches[0] if matches else None


def _default_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", str(path)]
    return ["xdg-open", str(path)]


def open_file(path: Path, program: Optional[str] = None) -> bool:
    """Start `program` (or the OS default viewer) on `path` without waiting."""
    try:
        if program:
            subprocess.Popen([program, str(path)])
        elif sys.platform == "win32":
            os.startfile(str(path))  # type: ignore[attr-defined]
        else:
            subprocess.Popen(_default_command(path))
    except OSError as exc:
        logger.error("Could not open %s: %s", path, exc)
        return False
    return True


def open_items(
    save_root: str | os.PathLike, items: Iterable[str], program: Optional[str] = None
) -> int:
    """Open each item; return how many could not be opened."""
    failures = 0
    for item in items:
        path = resolve_item(save_root, item)
        if path is None:
            logger.error("No downloaded file found for %s", item)
            failures += 1
            continue
        logger.info("Opening %s", path)
        if not open_file(path, program):
            failures += 1
    return failures
