"""Watching scene files for modification."""

from __future__ import annotations

import os
import sys
from typing import Iterable


class FileObserver:
    """Remembers file modification times and reports when they advance."""

    def __init__(self, files: Iterable[str]) -> None:
        self._mtimes: dict[str, int] = {}
        for file in files:
            print(f"Watching file {file}")
            try:
                self._mtimes[file] = int(os.stat(file).st_mtime)
            except OSError:
                print(f"Failed to get file status for {file}", file=sys.stderr)

    def update(self, files: Iterable[str]) -> bool:
        """True if any of ``files`` was modified since last seen."""
        modified = False
        for file in files:
            if not os.path.exists(file):
                print(f"File {file} does not exist anymore", file=sys.stderr)
                continue
            try:
                mtime = int(os.stat(file).st_mtime)
            except OSError:
                print(f"Failed to get file status for {file}", file=sys.stderr)
                continue
            if self._mtimes.get(file, 0) < mtime:
                self._mtimes[file] = mtime
                print(f"File {file} has been modified")
                modified = True
        return modified