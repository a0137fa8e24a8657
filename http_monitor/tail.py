"""HTTP Monitor - Follow a growing log file"""

import logging
import os
import threading
import time
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


def follow(path: str, from_start: bool = True, poll_interval: float = 0.2,
           stop: Optional[threading.Event] = None) -> Iterator[str]:
    """Yield complete lines from ``path`` as they are appended.

    Starts at the beginning of the file unless ``from_start`` is False.
    A trailing line without its newline is held back until the writer
    finishes it. If the file shrinks it is read again from offset 0.
    Returns once ``stop`` is set.
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        if not from_start:
            f.seek(0, os.SEEK_END)
        pending = ''
        while stop is None or not stop.is_set():
            chunk = f.readline()
            if not chunk:
                if _truncated(f, path):
                    logger.info("%s was truncated, reading from the start", path)
                    f.seek(0)
                    pending = ''
                    continue
                time.sleep(poll_interval)
                continue

            pending += chunk
            if not pending.endswith('\n'):
                continue
            line, pending = pending.rstrip('\r\n'), ''
            yield line


def _truncated(f, path: str) -> bool:
    try:
        return os.path.getsize(path) < f.tell()
    except OSError:
        return False
