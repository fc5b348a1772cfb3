"""Report writer — all-or-nothing file output."""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from provmatrix.errors import ReportWriteError

logger = logging.getLogger(__name__)


def write_report(content: str, path: Path | str) -> Path:
    """Atomic write: tmp file in the target directory, then os.replace.

    Either the full document lands at *path* or the previous file (if any)
    is left untouched.
    """
    target = Path(path)
    tmp = target.with_name(f".{target.name}.tmp")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, target)
    except OSError as exc:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise ReportWriteError(target, exc.strerror or str(exc)) from exc

    logger.info("Wrote %s (%d bytes)", target, len(content.encode("utf-8")))
    return target
