import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence
from ..config import LIBRARY_SOURCE_DIR
from ..utils import CUR_DIR, PARENT_DIR, PathLike, path_exists, split_path

logger = logging.getLogger(__name__)


def library_candidates(libs: Sequence[PathLike], source: PathLike) -> Iterator[Path]:
    """
    Yields, in priority order, the paths a library import may live at:
    `<lib>/<source>` and then `<lib>/<first>/src/<rest>` for every library root.
    Yields nothing if `source` does not start with a plain name.
    """
    drive, has_root, segments = split_path(source)
    if drive or has_root or not segments or segments[0] in (CUR_DIR, PARENT_DIR):
        return
    first_dir, rest = segments[0], segments[1:]
    for lib in libs:
        lib = Path(lib)
        yield lib / source
        yield lib.joinpath(first_dir, LIBRARY_SOURCE_DIR, *rest)


def resolve_library(libs: Sequence[PathLike], source: PathLike) -> Optional[Path]:
    """
    Returns the path of a library import if it exists under one of `libs`.

    Absolute imports are returned as they are. Relative imports (`./`, `../`)
    are never library imports. Remappings are not handled here.
    """
    drive, has_root, _ = split_path(source)
    if drive:
        return None
    if has_root:
        return Path(source)

    for candidate in library_candidates(libs, source):
        if path_exists(candidate):
            logger.debug(f"Library import {source} found at {candidate}")
            return candidate
    return None


def is_local_source_name(libs: Sequence[PathLike], source: PathLike) -> bool:
    """Whether `source` is a local import, i.e. not resolvable as a library import."""
    return resolve_library(libs, source) is None
