"""Helpers shared by the JSON-file repositories.

Each file holds a JSON list of records.  Writes go to a sibling
temporary file which is then renamed over the target, so readers see
either the old list or the new one, never a half-written file.

A read-check-write cycle must run under ``write_lock`` so that two
writers (threads or processes) cannot both pass a version check against
the same stored record.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from filelock import FileLock


def write_lock(file_path: Path) -> FileLock:
    """Exclusive lock on a sidecar ``<name>.lock`` file next to *file_path*."""
    return FileLock(str(file_path.with_name(f"{file_path.name}.lock")))


def ensure_file(file_path: Path) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with write_lock(file_path):
        if not file_path.exists():
            write_records(file_path, [])


def load_records(file_path: Path) -> list[dict]:
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_records(file_path: Path, records: list[dict]) -> None:
    payload = json.dumps(records, indent=2) + "\n"
    fd, tmp_name = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
