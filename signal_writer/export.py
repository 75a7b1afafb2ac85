# signal_writer/export.py
# Plain-text file export of a generated signal.

from __future__ import annotations
from pathlib import Path
from typing import Optional

from signal_writer.log import get_logger
from signal_writer.settings import settings

logger = get_logger("signal_writer.export")


def save_document(text: str, directory: str | Path = ".", filename: Optional[str] = None) -> Path:
    """Write the exact document text to <directory>/<filename> and return the path."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / (filename or settings.EXPORT_FILENAME)
    # newline="" keeps the text byte-for-byte
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.info("saved signal to %s (%d chars)", path, len(text))
    return path
