from __future__ import annotations

from pathlib import Path


def atomic_write(path: Path, data: str) -> None:
    """Overwrite path in full via a sibling .tmp file.

    A symlinked path is written through to its target. The .tmp file is removed
    if the write fails.
    """
    path = Path(path).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(data, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
