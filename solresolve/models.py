from pathlib import Path
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class ImportAlias(BaseModel):
    """An `as` binding inside an import statement."""
    model_config = ConfigDict(frozen=True)

    alias: str
    target: Optional[str] = Field(None, description="Aliased symbol, or None when the whole file is aliased")


class RawImport(BaseModel):
    """An import literal extracted from one source text."""
    model_config = ConfigDict(frozen=True)

    path_text: str = Field(..., description="The unquoted import target (e.g. './Token.sol')")
    aliases: List[ImportAlias] = Field(default_factory=list)
    start: int = Field(..., description="UTF-8 byte offset of the first byte of the literal")
    end: int = Field(..., description="UTF-8 byte offset one past the last byte of the literal")


class ResolutionAttempt(BaseModel):
    """A candidate location tried while resolving an import."""
    tier: str  # relative, library, absolute, root
    candidate: Path


class ResolvedImport(BaseModel):
    """The outcome of resolving one import string."""
    import_path: str
    path: Path = Field(..., description="Existing, lexically normalized path")
    canonical: Path = Field(..., description="Symlink-resolved path, or `path` if that failed")
    kind: Literal["relative", "library", "absolute", "root"]
    include_path: Optional[Path] = None
