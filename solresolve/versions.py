import os
import re
import logging
from pathlib import Path
from typing import List, Optional
from packaging.version import InvalidVersion, Version

from .config import SVM_HOME
from .utils import PathLike

logger = logging.getLogger(__name__)

# Installed compilers live in directories named exactly `MAJOR.MINOR.PATCH`,
# semver core rules: no leading zeros. Pre-release and build suffixes
# (`0.8.10-nightly...`) have no packaging.version ordering and are skipped.
RE_VERSION_DIR = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$")


def parse_version_dir(name: str) -> Optional[Version]:
    if not RE_VERSION_DIR.fullmatch(name):
        return None
    try:
        return Version(name)
    except InvalidVersion:
        return None


def installed_versions(root: Optional[PathLike] = None) -> List[Version]:
    """
    Returns the compiler versions installed under `root` (default SVM_HOME),
    e.g. `~/.svm/0.8.10`, sorted in ascending order.
    Entries that are not directories or not named as a version are skipped.
    """
    root = Path(root) if root is not None else SVM_HOME
    versions = []
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        logger.debug(f"Cannot read version directory {root}: {e}")
        return []

    for entry in entries:
        try:
            if not entry.is_dir():
                continue
        except OSError:
            continue
        version = parse_version_dir(entry.name)
        if version is None:
            logger.debug(f"Skipping {entry.path}: not a version directory")
            continue
        versions.append(version)

    versions.sort()
    return versions
