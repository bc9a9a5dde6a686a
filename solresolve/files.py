import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Type
from pydantic import BaseModel

from .config import SOURCE_EXTENSIONS
from .errors import CaseSensitiveFileNameError, SolcError, SolcIoError
from .utils import PathLike

logger = logging.getLogger(__name__)


def _log_walk_error(err: OSError):
    logger.debug(f"Skipping unreadable entry during source discovery: {err}")


def _is_source(path: Path) -> bool:
    return path.suffix in SOURCE_EXTENSIONS


def source_files_iter(root: PathLike) -> Iterator[Path]:
    """
    Yields every Solidity/Yul file under `root`, or `root` itself if it is one.
    Symlinks are followed; unreadable entries and symlink cycles are skipped.
    """
    root = Path(root)
    if os.path.isfile(root):
        if _is_source(root):
            yield root
        return

    # dirpath -> real paths of the directories above it
    ancestors: Dict[str, FrozenSet[str]] = {os.fspath(root): frozenset()}
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True, onerror=_log_walk_error):
        real = os.path.realpath(dirpath)
        chain = ancestors.pop(dirpath, frozenset())
        if real in chain:
            logger.debug(f"Symlink cycle at {dirpath}, not descending")
            dirnames[:] = []
            continue
        chain = chain | {real}
        for name in dirnames:
            ancestors[os.path.join(dirpath, name)] = chain

        for name in filenames:
            path = Path(dirpath) / name
            if _is_source(path) and os.path.isfile(path):
                yield path


def source_files(root: PathLike) -> List[Path]:
    """Returns all source files under `root`. Imports pointing elsewhere are not followed."""
    return list(source_files_iter(root))


def solidity_dirs(root: PathLike) -> List[Path]:
    """Returns the unique directories under `root` that directly contain a source file."""
    return list({p.parent for p in source_files_iter(root)})


def find_case_sensitive_existing_file(non_existing: PathLike) -> Optional[Path]:
    """
    Looks next to a missing file for one whose name differs only in (ASCII) case.
    Returns None if there is none or the directory cannot be read.
    """
    non_existing = Path(non_existing)
    name = non_existing.name
    if not name:
        return None
    parent = non_existing.parent
    wanted = os.fsencode(name).lower()

    try:
        with os.scandir(parent) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return None

    for entry in entries:
        if entry.name == name or os.fsencode(entry.name).lower() != wanted:
            continue
        try:
            if entry.is_file():
                return parent / entry.name
        except OSError:
            continue
    return None


def read_source_file(path: PathLike) -> str:
    """
    Reads a source file. If it is missing but a differently-cased sibling
    exists, raises CaseSensitiveFileNameError instead of a plain I/O error.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        existing = find_case_sensitive_existing_file(path)
        if existing is not None:
            logger.warning(f"{path} not found, but {existing} exists")
            raise CaseSensitiveFileNameError(path, existing) from e
        raise SolcIoError(e, path) from e
    except OSError as e:
        raise SolcIoError(e, path) from e


def read_json_file(path: PathLike, model: Optional[Type[BaseModel]] = None) -> Any:
    """Reads a JSON file, validating it into `model` when one is given."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SolcIoError(e, path) from e

    try:
        if model is not None:
            return model.model_validate_json(data)
        return json.loads(data)
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError both derive from ValueError
        raise SolcError(f'Failed to parse JSON file "{path}": {e}') from e


def write_json_file(value: Any, path: PathLike):
    path = Path(path)
    if isinstance(value, BaseModel):
        payload = value.model_dump_json()
    else:
        payload = json.dumps(value)
    try:
        path.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise SolcIoError(e, path) from e


def create_parent_dir_all(file: PathLike):
    """Creates the parent directory of `file` and all of its ancestors."""
    parent = Path(file).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SolcError(f'Failed to create artifact parent folder "{parent}": {e}') from e
