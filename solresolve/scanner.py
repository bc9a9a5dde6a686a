"""
Pattern-based extraction of import, pragma and license statements from
Solidity/Yul source text.

None of these parse the grammar; they tolerate arbitrary surrounding text and
simply return nothing when a statement is not found.
"""
import re
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from .models import ImportAlias, RawImport

T = TypeVar("T")

# Matches `import "X";`, `import "X" as A;`, `import {A as B, C} from "X";`,
# `import * as A from "X";` and `import A from "X";` with either quote style.
# Exactly one of the path groups p1..p4 participates in a match.
# Names inside braces must be comma-separated: no repeated group may match empty.
RE_SOL_IMPORT = re.compile(
    r"""import\s+(?:(?:"(?P<p1>.*)"|'(?P<p2>.*)')(?:\s+as\s+\w+)?|(?:(?:\w+(?:\s+as\s+\w+)?|\*\s+as\s+\w+|\{\s*\w+(?:\s+as\s+\w+)?(?:\s*,\s*\w+(?:\s+as\s+\w+)?)*\s*,?\s*\})\s+from\s+(?:"(?P<p3>.*)"|'(?P<p4>.*)')))\s*;"""
)

RE_SOL_IMPORT_ALIAS = re.compile(r"""(?:(?P<target>\w+)|\*|'|")\s+as\s+(?P<alias>\w+)""")

# `pragma solidity ^0.5.2;` -> `^0.5.2`
RE_SOL_PRAGMA_VERSION = re.compile(r"pragma\s+solidity\s+(?P<version>.+?);")

RE_SOL_SDPX_LICENSE_IDENTIFIER = re.compile(r"///?\s*SPDX-License-Identifier:\s*(?P<license>.+)")

RE_THREE_OR_MORE_NEWLINES = re.compile(r"\n{3,}")

_PATH_GROUPS = ("p1", "p2", "p3", "p4")


class SourceScan(Generic[T]):
    """
    Lazy view over the import statements of a source text.

    Every iteration rescans the text from the start, so the same scan can be
    consumed more than once.
    """

    def __init__(self, source: str, project: Callable[["re.Match[str]"], Optional[T]]):
        self.source = source
        self._project = project

    def __iter__(self) -> Iterator[T]:
        for match in RE_SOL_IMPORT.finditer(self.source):
            item = self._project(match)
            if item is not None:
                yield item


def _path_group(match: "re.Match[str]") -> Optional[str]:
    for group in _PATH_GROUPS:
        if match.group(group) is not None:
            return group
    return None


def _import_path_of(match: "re.Match[str]") -> Optional[str]:
    group = _path_group(match)
    return match.group(group) if group else None


def _byte_offset(source: str, index: int) -> int:
    return len(source[:index].encode("utf-8", "surrogatepass"))


def _raw_import_of(match: "re.Match[str]") -> Optional[RawImport]:
    group = _path_group(match)
    if group is None:
        return None
    start = _byte_offset(match.string, match.start(group))
    path_text = match.group(group)
    return RawImport(
        path_text=path_text,
        aliases=find_import_aliases(match.group(0)),
        start=start,
        end=start + len(path_text.encode("utf-8", "surrogatepass")),
    )


def find_import_paths(source: str) -> SourceScan[str]:
    """
    Returns all import paths in a source text, in source order:
    `import "./contracts/Contract.sol";` -> `./contracts/Contract.sol`
    """
    return SourceScan(source, _import_path_of)


def find_imports(source: str) -> SourceScan[RawImport]:
    """Like `find_import_paths`, but yields the literal offsets and alias bindings too."""
    return SourceScan(source, _raw_import_of)


def find_import_aliases(statement: str) -> List[ImportAlias]:
    """
    Returns the `as` bindings of a single import statement.
    `{A as B}` binds symbol A to B; `* as B` and `"X" as B` alias the whole file.
    """
    aliases = []
    for match in RE_SOL_IMPORT_ALIAS.finditer(statement):
        aliases.append(ImportAlias(alias=match.group("alias"), target=match.group("target")))
    return aliases


def find_version_pragma(source: str) -> Optional[str]:
    """`pragma solidity ^0.5.2;` -> `^0.5.2`"""
    match = RE_SOL_PRAGMA_VERSION.search(source)
    if match is None:
        return None
    return match.group("version").strip()


def find_license(source: str) -> Optional[str]:
    """`// SPDX-License-Identifier: MIT` -> `MIT`"""
    match = RE_SOL_SDPX_LICENSE_IDENTIFIER.search(source)
    if match is None:
        return None
    return match.group("license").strip()


def collapse_blank_lines(text: str) -> str:
    return RE_THREE_OR_MORE_NEWLINES.sub("\n\n", text)
