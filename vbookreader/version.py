from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional


def _git_commit() -> Optional[str]:
    here = Path(__file__).resolve().parent
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short=7", "HEAD"],
            cwd=str(here),
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def get_version() -> str:
    try:
        return importlib.metadata.version("vbookreader")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_string() -> str:
    commit = _git_commit()
    version = get_version()
    return f"{version} ({commit})" if commit else version
