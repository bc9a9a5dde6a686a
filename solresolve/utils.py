import os
import errno
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
from .errors import SolcIoError

PathLike = Union[str, "os.PathLike[str]"]

CUR_DIR = "."
PARENT_DIR = ".."


def split_path(path: PathLike) -> Tuple[str, bool, List[str]]:
    """
    Splits a path into (drive, has_root, segments) without touching the filesystem.
    Empty segments (repeated separators) are dropped, `.` and `..` are kept.
    """
    text = os.fspath(path)
    if os.altsep:
        text = text.replace(os.altsep, os.sep)
    drive, rest = os.path.splitdrive(text)
    has_root = rest.startswith(os.sep)
    return drive, has_root, [s for s in rest.split(os.sep) if s]


def _components(path: PathLike) -> List[str]:
    drive, has_root, segments = split_path(path)
    components = []
    if drive or has_root:
        components.append(drive + (os.sep if has_root else ""))
    for i, segment in enumerate(segments):
        # Only a leading `.` of a relative path counts as a component
        if segment == CUR_DIR and (components or i > 0):
            continue
        components.append(segment)
    return components


def clean_path(path: PathLike) -> Path:
    """
    Lexically cleans a path.

    - `.` segments are dropped and repeated separators collapse into one.
    - `..` removes the preceding segment if that segment is a plain name,
      otherwise (leading, after another `..`, or right after the root) it is kept.

    The filesystem is never consulted, so symlinks are not taken into account:
    `a/b/../c.sol` becomes `a/c.sol` even if `b` is a symlink.
    """
    drive, has_root, segments = split_path(path)
    cleaned: List[str] = []
    for segment in segments:
        if segment == CUR_DIR:
            continue
        if segment == PARENT_DIR:
            if cleaned and cleaned[-1] != PARENT_DIR:
                cleaned.pop()
            else:
                cleaned.append(segment)
        else:
            cleaned.append(segment)

    anchor = drive + (os.sep if has_root else "")
    return Path(anchor, *cleaned)


def path_exists(path: PathLike) -> bool:
    """Like `Path.exists`, but any OS error (name too long, permission denied, ...) counts as missing."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def normalize_import_path(directory: PathLike, import_path: PathLike) -> Path:
    """
    Joins `import_path` onto `directory` and lexically cleans the result.

    Unlike `canonicalize`, symlinks are left in place. Raises SolcIoError
    (annotated with the joined, uncleaned path) if the result does not exist.

    The result is a native `Path`; `to_posix` gives its forward-slash form.
    """
    original = Path(directory) / import_path
    normalized = clean_path(original)
    try:
        os.stat(normalized)
    except OSError as e:
        raise SolcIoError(e, original) from e
    except ValueError as e:
        raise SolcIoError(OSError(errno.EINVAL, str(e)), original) from e
    return normalized


def to_posix(path: PathLike) -> str:
    """
    Returns the forward-slash form of a path.
    On Windows, the drive letter is lowercased so that equal paths compare
    equal as strings.
    """
    path_str = Path(path).as_posix()
    if os.name == 'nt' and len(path_str) > 1 and path_str[1] == ':':
        path_str = path_str[0].lower() + path_str[1:]
    return path_str


def canonicalize(path: PathLike) -> Path:
    """Resolves symlinks and relative segments. Raises SolcIoError if the path is not accessible."""
    try:
        return Path(path).resolve(strict=True)
    except OSError as e:
        raise SolcIoError(e, path) from e
    except RuntimeError as e:
        # Symlink loops raise RuntimeError on older interpreters
        raise SolcIoError(OSError(errno.ELOOP, str(e)), path) from e


def canonicalized(path: PathLike) -> Path:
    """
    Like `canonicalize`, but returns the path unchanged if it cannot be resolved.

    Needed where a directory may be reachable through a symlink, e.g. temp dirs
    under `/var` which is a link to `/private/var` on macOS.
    """
    try:
        return canonicalize(path)
    except SolcIoError:
        return Path(path)


def common_ancestor(a: PathLike, b: PathLike) -> Optional[Path]:
    """Finds the longest shared leading path of `a` and `b`, or None if the first components differ."""
    common = []
    for c1, c2 in zip(_components(a), _components(b)):
        if c1 != c2:
            break
        common.append(c1)
    if not common:
        return None
    return Path(*common)


def common_ancestor_all(paths: Iterable[PathLike]) -> Optional[Path]:
    it = iter(paths)
    first = next(it, None)
    if first is None:
        return None
    ret = Path(first)
    for path in it:
        ret = common_ancestor(ret, path)
        if ret is None:
            return None
    return ret


def source_name(source: PathLike, root: PathLike) -> Path:
    """`/project/src/Token.sol` under `/project` -> `src/Token.sol`; unrelated paths are returned as is."""
    try:
        return Path(source).relative_to(root)
    except ValueError:
        return Path(source)


def find_fave_or_alt_path(root: PathLike, fave: str, alt: str) -> Path:
    """Returns `root/fave`, unless it is missing and `root/alt` exists."""
    p = Path(root) / fave
    if not path_exists(p):
        alt_path = Path(root) / alt
        if path_exists(alt_path):
            return alt_path
    return p
