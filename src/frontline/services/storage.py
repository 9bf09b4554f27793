"""Load and save the subscription state file.

The file is JSON with camelCase keys (see `SubscriptionSet`). Saving always
goes through a `<path>.tmp` sibling that is moved onto the destination with
`os.replace`, so the destination is either the old complete file or the new
complete file, never a truncated one.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from frontline.core.config import SubscriptionSet
from frontline.core.errors import ConfigCorrupt, ConfigNotFound, PersistenceFailed

logger = logging.getLogger(__name__)


def load_subscriptions(path: str | os.PathLike) -> SubscriptionSet:
    """Read and validate the state file.

    A relative `saveRoot` is resolved against the folder holding the file.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigNotFound(path)
    try:
        raw = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigCorrupt(path, str(exc)) from exc
    try:
        subscriptions = SubscriptionSet.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigCorrupt(path, str(exc)) from exc

    logger.debug("Loaded %d sources from %s", len(subscriptions.sources), path)
    return subscriptions


def resolve_save_root(subscriptions: SubscriptionSet, state_path: str | os.PathLike) -> Path:
    root = Path(subscriptions.save_root).expanduser()
    if not root.is_absolute():
        root = Path(state_path).parent / root
    return root


def dump_subscriptions(subscriptions: SubscriptionSet) -> str:
    return subscriptions.model_dump_json(by_alias=True, indent=2) + "\n"


def save_subscriptions(subscriptions: SubscriptionSet, path: str | os.PathLike) -> None:
    """Atomically replace `path` with the serialized subscriptions."""
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as fh:
            fh.write(dump_subscriptions(subscriptions))
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        try:
            tmp.unlink()
        except OSError:
            logger.debug("No temp file to remove at %s", tmp)
        raise PersistenceFailed(path, str(exc)) from exc

    logger.debug("Saved %d sources to %s", len(subscriptions.sources), path)
