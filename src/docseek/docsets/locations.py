"""Resolution of the docsets directory.

The search core only ever receives a resolved path; everything
platform-specific lives here.
"""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from docseek.utils.config import Config, get_config
from docseek.utils.logging import get_logger

logger = get_logger(__name__)

DOCSET_DIR_ENV_VAR = "DOCSEEK_DOCSET_DIR"
ZEAL_DOCSETS_SUBPATH = Path("Zeal") / "Zeal" / "docsets"


def _linux_docsets_dir() -> Optional[Path]:
    data_home = os.getenv("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / ZEAL_DOCSETS_SUBPATH


def _macos_docsets_dir() -> Optional[Path]:
    return Path.home() / "Library" / "Application Support" / ZEAL_DOCSETS_SUBPATH


def _windows_docsets_dir() -> Optional[Path]:
    appdata = os.getenv("APPDATA")
    if not appdata:
        return None
    return Path(appdata) / ZEAL_DOCSETS_SUBPATH


PLATFORM_STRATEGIES: Dict[str, Callable[[], Optional[Path]]] = {
    "linux": _linux_docsets_dir,
    "darwin": _macos_docsets_dir,
    "win32": _windows_docsets_dir,
}


def platform_strategy(platform: Optional[str] = None) -> Callable[[], Optional[Path]]:
    """Pick the default-location strategy for a platform.

    Args:
        platform: ``sys.platform`` style name (defaults to the running one)

    Returns:
        Callable returning the default docsets directory (or None)
    """
    platform = platform or sys.platform
    for prefix, strategy in PLATFORM_STRATEGIES.items():
        if platform.startswith(prefix):
            return strategy
    # Other unix-likes follow the XDG layout
    return _linux_docsets_dir


def resolve_docsets_dir(
    override: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
    platform: Optional[str] = None,
) -> Optional[Path]:
    """Resolve the docsets directory.

    Priority: explicit override > ``docsets.dir`` config >
    DOCSEEK_DOCSET_DIR env var > platform default.

    Args:
        override: Directory given on the command line
        config: Optional config instance. If None, uses get_config()
        platform: Optional platform name for the default strategy

    Returns:
        Resolved directory, or None when no location can be determined
    """
    if override:
        return Path(override).expanduser()

    if config is None:
        config = get_config()

    configured = config.get("docsets.dir")
    if configured:
        return Path(configured).expanduser()

    env_dir = os.getenv(DOCSET_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).expanduser()

    resolved = platform_strategy(platform)()
    logger.debug(f"Using platform default docsets directory: {resolved}")
    return resolved


def check_viewer(binary: str = "zeal") -> bool:
    """Check that the docset viewer executable is on PATH.

    Args:
        binary: Executable name

    Returns:
        True if found
    """
    if shutil.which(binary) is None:
        logger.debug(f"Viewer binary `{binary}` not found on PATH")
        return False
    return True
