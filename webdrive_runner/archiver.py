"""Move test results into a per-driver directory."""

import logging
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger(__name__)

RESERVED_LOG_NAME = "application.log"


def archive_results(result_root: Path, backend_name: str) -> Sequence[Path]:
    """Move the result files of a driver run under ``result_root/backend_name``.

    Only regular files directly inside ``result_root`` are moved; the shared
    application log stays in place. A file that cannot be moved is reported
    and skipped.

    Returns:
        Paths of the moved files

    """
    dest_dir = result_root / backend_name
    dest_dir.mkdir(parents=True, exist_ok=True)

    moved: list[Path] = []
    for path in sorted(result_root.iterdir()):
        if path.name == RESERVED_LOG_NAME or not path.is_file():
            continue
        target = dest_dir / path.name
        try:
            path.replace(target)
        except OSError as e:
            log.warning("Could not create %s: %s", target, e)
            continue
        moved.append(target)

    log.info("Archived %d result file(s) to %s", len(moved), dest_dir)
    return moved
