"""
--install / --uninstall: copy the clapscan launcher into a directory that
is usually on PATH (~/bin unless CLAPSCAN_INSTALL_DIR says otherwise).
"""

import logging
import os
import shutil
import sys
from pathlib import Path

from core.config import settings

log = logging.getLogger(__name__)

EXECUTABLE_NAME = "clapscan.exe" if os.name == "nt" else "clapscan"


def install_dir() -> Path:
    if settings.install_dir:
        return Path(settings.install_dir).expanduser()
    return Path.home() / "bin"


def _current_launcher() -> Path:
    found = shutil.which(sys.argv[0]) or sys.argv[0]
    return Path(found).resolve()


def install() -> Path:
    source = _current_launcher()
    if not source.is_file():
        raise FileNotFoundError(f"cannot locate the running launcher ({source})")
    bin_dir = install_dir()
    if not bin_dir.exists():
        bin_dir.mkdir(parents=True)
        log.info("created directory %s", bin_dir)
    target = bin_dir / EXECUTABLE_NAME
    shutil.copy2(source, target)
    log.info("installed %s -> %s", source, target)
    return target


def uninstall() -> bool:
    target = install_dir() / EXECUTABLE_NAME
    if not target.exists():
        return False
    target.unlink()
    log.info("removed %s", target)
    return True
