from pathlib import Path
from typing import List, Optional, Union
from .models import ResolutionAttempt


class SolcError(Exception):
    """Base class for all errors raised by solresolve."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SolcIoError(SolcError):
    """An I/O failure annotated with the path that caused it."""

    def __init__(self, io_error: OSError, path: Union[str, Path]):
        self.io_error = io_error
        self.path = Path(path)
        reason = io_error.strerror or str(io_error)
        super().__init__(f'{reason}: "{self.path}"')


class CaseSensitiveFileNameError(SolcError):
    """
    Raised when a file is missing but a sibling with the same name in a
    different case exists. Usually means the dependency was checked out on a
    case-insensitive filesystem.
    """

    def __init__(self, path: Union[str, Path], existing: Union[str, Path]):
        self.path = Path(path)
        self.existing = Path(existing)
        super().__init__(
            f'Failed to resolve file: "{self.path}". '
            f'A file with different case exists: "{self.existing}". '
            "Check the import path and the casing of the file on disk."
        )


class ImportNotFoundError(SolcError):
    """Raised when an import could not be resolved by any resolution tier."""

    def __init__(
        self,
        import_path: str,
        source_file: Union[str, Path],
        attempts: Optional[List[ResolutionAttempt]] = None,
        case_hint: Optional[Path] = None,
    ):
        self.import_path = import_path
        self.source_file = Path(source_file)
        self.attempts = list(attempts or [])
        self.case_hint = case_hint

        lines = [f'Failed to resolve import "{import_path}" from "{self.source_file}".']
        if self.attempts:
            lines.append("Tried:")
            lines.extend(f"  [{a.tier}] {a.candidate}" for a in self.attempts)
        if case_hint is not None:
            lines.append(f'A file with different case exists: "{case_hint}"')
        super().__init__("\n".join(lines))
