"""
Snapshot persistence.

The dashboard backend reads the snapshot file as-is, so each run
replaces it in a single rename and never leaves a half-written file.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from mission_control.models.scout import ResultSnapshot


logger = logging.getLogger(__name__)


def write_snapshot(snapshot: ResultSnapshot, path: Union[str, Path]) -> Path:
    """
    Write a snapshot, replacing any previous one.

    Args:
        snapshot: The run's results
        path: Destination JSON file

    Returns:
        The path written

    Raises:
        OSError: If the file cannot be written. The previous snapshot is left untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(snapshot.to_json())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(f"Results saved to {path}")
    return path


def load_snapshot(path: Union[str, Path]) -> Optional[ResultSnapshot]:
    """
    Load the last snapshot written.

    Returns:
        The snapshot, or None if there is none yet or it cannot be parsed
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No snapshot at {path} yet")
        return None

    try:
        return ResultSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load snapshot {path}: {e}")
        return None
