"""Temporary copies of source files that another application holds open."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

_LOG = logging.getLogger(__name__)


@contextmanager
def temporary_copy(path: Union[str, Path], temp_dir: Optional[str] = None) -> Iterator[Path]:
    """Copy ``path`` to a unique temporary file and yield the copy.

    The suffix is preserved so readers that pick an engine by extension still
    work. The copy is removed when the block exits.
    """
    source = Path(path)
    fd, name = tempfile.mkstemp(prefix=f"{source.stem}_", suffix=source.suffix, dir=temp_dir)
    os.close(fd)
    copy_path = Path(name)
    try:
        shutil.copyfile(source, copy_path)
        _LOG.debug("Copied %s to %s", source, copy_path)
        yield copy_path
    finally:
        try:
            copy_path.unlink()
        except OSError as exc:
            _LOG.debug("Could not remove temporary copy %s: %s", copy_path, exc)
