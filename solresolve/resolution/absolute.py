import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple
from ..errors import SolcIoError
from ..utils import PathLike, normalize_import_path

logger = logging.getLogger(__name__)


def _parent(path: Path) -> Optional[Path]:
    parent = path.parent
    return None if parent == path else parent


def ancestors_below(root: PathLike, cwd: PathLike) -> Iterator[Path]:
    """Yields the ancestors of `cwd`, nearest first, stopping before `root`."""
    root = Path(root)
    parent = _parent(Path(cwd))
    while parent is not None and parent != root:
        yield parent
        parent = _parent(parent)


def resolve_absolute_library(root: PathLike, cwd: PathLike, import_path: PathLike) -> Optional[Tuple[Path, Path]]:
    """
    Finds a root-relative import like `src/interfaces/IConfig.sol` by trying it
    against every ancestor of `cwd` until `root` is reached.

    For the layout

        <root>/mydependency/
        └── src              (cwd)
            └── interfaces
                └── IConfig.sol

    `src/interfaces/IConfig.sol` resolves to
    (`<root>/mydependency`, `<root>/mydependency/src/interfaces/IConfig.sol`).

    Returns None if no ancestor below `root` contains the import.
    """
    for ancestor in ancestors_below(root, cwd):
        try:
            resolved = normalize_import_path(ancestor, import_path)
        except SolcIoError:
            continue
        logger.debug(f"Absolute import {import_path} found under {ancestor}")
        return ancestor, resolved
    return None
