"""Locate, load and query the user's .netrc file."""

import logging
import os
import platform
from pathlib import Path

from .netrc import Machine, Netrc

logger = logging.getLogger(__name__)


def find_netrc_path() -> Path:
    """Resolve the netrc file location.

    $NETRC wins when set. Otherwise ~/.netrc, except on Windows where
    ~/_netrc is used if ~/.netrc does not exist.
    """
    if env_path := os.environ.get("NETRC"):
        return Path(env_path).expanduser()

    path = Path.home() / ".netrc"
    if platform.system() == "Windows" and not path.exists():
        path = Path.home() / "_netrc"
    return path


def load_netrc(path: Path | None = None) -> Netrc | None:
    """Parse the netrc file at ``path`` (or the resolved default).

    Returns None if the file does not exist. Parse and read errors propagate.
    """
    if path is None:
        path = find_netrc_path()

    logger.debug("Reading netrc from %s", path)
    if not path.exists():
        logger.debug("No netrc file at %s", path)
        return None

    return Netrc.from_file(path)


def find_credentials(host: str, path: Path | None = None) -> Machine | None:
    """Find the credentials for ``host``.

    Args:
        host: Machine name as written in the netrc file
        path: Path to the netrc file. Defaults to $NETRC or ~/.netrc

    Returns:
        The first matching machine record, else the default record, else None
    """
    netrc = load_netrc(path)
    if netrc is None:
        return None

    machine = netrc.find(host)
    if machine is None:
        logger.debug("No credentials for %s", host)
    return machine
