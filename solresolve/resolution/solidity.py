import logging
from pathlib import Path
from typing import List, Optional, Sequence
from .base import ImportResolver
from .absolute import ancestors_below, resolve_absolute_library
from .library import library_candidates, resolve_library
from ..config import LIB_PATHS
from ..errors import ImportNotFoundError, SolcIoError
from ..files import find_case_sensitive_existing_file
from ..models import ResolutionAttempt, ResolvedImport
from ..utils import (
    CUR_DIR,
    PARENT_DIR,
    PathLike,
    canonicalized,
    clean_path,
    normalize_import_path,
    path_exists,
    split_path,
    to_posix,
)

logger = logging.getLogger(__name__)


class SolidityImportResolver(ImportResolver):
    """
    Resolves Solidity/Yul imports following the compiler's path resolution rules.
    Handles:
    - Relative imports (import './Token.sol', import '../lib/Math.sol')
    - Library imports (import 'forge-std/Test.sol' -> <lib>/forge-std/Test.sol or <lib>/forge-std/src/Test.sol)
    - Root-relative imports (import 'src/interfaces/IConfig.sol'), found by walking up from the importing file

    See https://docs.soliditylang.org/en/latest/path-resolution.html
    """

    def __init__(self, project_root: Optional[PathLike] = None, lib_paths: Optional[Sequence[PathLike]] = None):
        self.project_root = Path(project_root) if project_root is not None else None
        self.lib_paths = [Path(p) for p in (lib_paths if lib_paths is not None else LIB_PATHS)]

    def resolve(self, source_file: str, import_string: str, project_root: Optional[Path] = None) -> Optional[str]:
        try:
            resolved = self.resolve_import(source_file, import_string, project_root)
        except ImportNotFoundError as e:
            logger.debug(str(e))
            return None
        return to_posix(resolved.path)

    def resolve_import(self, source_file: PathLike, import_string: str, project_root: Optional[PathLike] = None) -> ResolvedImport:
        """
        Resolves `import_string` as written in `source_file`.
        Raises ImportNotFoundError listing every candidate that was tried.
        """
        if project_root is None:
            project_root = self.project_root
        else:
            project_root = Path(project_root)

        cwd = Path(source_file).parent
        attempts: List[ResolutionAttempt] = []

        # 1. Relative imports only ever resolve against the importing file's directory
        drive, has_root, segments = split_path(import_string)
        if not (drive or has_root) and segments and segments[0] in (CUR_DIR, PARENT_DIR):
            attempts.append(ResolutionAttempt(tier="relative", candidate=clean_path(cwd / import_string)))
            path = self._try_normalize(cwd, import_string)
            if path is not None:
                return self._resolved(import_string, path, "relative")
            self._fail(import_string, source_file, attempts)

        # 2. Library roots
        libs = self._lib_roots(project_root)
        attempts.extend(ResolutionAttempt(tier="library", candidate=c) for c in library_candidates(libs, import_string))
        path = resolve_library(libs, import_string)
        if path is not None:
            if path_exists(path):
                return self._resolved(import_string, path, "library")
            attempts.append(ResolutionAttempt(tier="library", candidate=path))

        # 3. Root-relative imports, walking up from the importing file
        # Project root paths only apply to files inside the project
        in_project = project_root is not None and cwd.is_relative_to(project_root)
        base = self._library_ancestor(libs, cwd) or (project_root if in_project else None)
        if base is not None:
            attempts.extend(
                ResolutionAttempt(tier="absolute", candidate=clean_path(ancestor / import_string))
                for ancestor in ancestors_below(base, cwd)
            )
            found = resolve_absolute_library(base, cwd, import_string)
            if found is not None:
                include_path, path = found
                return self._resolved(import_string, path, "absolute", include_path)

        # 4. The project root itself
        if in_project:
            attempts.append(ResolutionAttempt(tier="root", candidate=clean_path(project_root / import_string)))
            path = self._try_normalize(project_root, import_string)
            if path is not None:
                return self._resolved(import_string, path, "root")

        self._fail(import_string, source_file, attempts)

    def _lib_roots(self, project_root: Optional[Path]) -> List[Path]:
        if project_root is None:
            return list(self.lib_paths)
        return [p if p.is_absolute() else project_root / p for p in self.lib_paths]

    @staticmethod
    def _library_ancestor(libs: Sequence[Path], cwd: Path) -> Optional[Path]:
        """Returns the library root containing `cwd`, if the importing file lives inside a library."""
        for lib in libs:
            if cwd.is_relative_to(lib):
                return lib
        return None

    @staticmethod
    def _try_normalize(directory: Path, import_string: str) -> Optional[Path]:
        try:
            return normalize_import_path(directory, import_string)
        except SolcIoError:
            return None

    @staticmethod
    def _resolved(import_string: str, path: Path, kind: str, include_path: Optional[Path] = None) -> ResolvedImport:
        logger.debug(f"Resolved {kind} import {import_string} -> {path}")
        return ResolvedImport(
            import_path=import_string,
            path=path,
            canonical=canonicalized(path),
            kind=kind,
            include_path=include_path,
        )

    @staticmethod
    def _fail(import_string: str, source_file: PathLike, attempts: List[ResolutionAttempt]):
        case_hint = None
        for attempt in attempts:
            case_hint = find_case_sensitive_existing_file(attempt.candidate)
            if case_hint is not None:
                logger.warning(f"Import {import_string} not found, but {case_hint} exists with different case")
                break
        raise ImportNotFoundError(import_string, source_file, attempts, case_hint)
