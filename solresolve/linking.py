"""
Library link placeholders.

The compiler leaves a placeholder in the bytecode wherever a linked library's
address must be filled in. Current compilers use `__$<hash>$__` where
`<hash>` is the first 17 bytes of the keccak-256 hash of the fully qualified
library name (`path/to/File.sol:LibName`); old compilers used the name itself
padded to 36 characters.

See https://docs.soliditylang.org/en/develop/using-the-compiler.html#library-linking
"""
from typing import Union
from eth_utils import keccak

from .config import LEGACY_PLACEHOLDER_LEN, LIBRARY_HASH_BYTES, PLACEHOLDER_FILL


def _as_bytes(name: Union[str, bytes]) -> bytes:
    if isinstance(name, str):
        return name.encode("utf-8")
    return bytes(name)


def library_hash(name: Union[str, bytes]) -> bytes:
    """Returns the 17 byte prefix of keccak256(name)."""
    return keccak(_as_bytes(name))[:LIBRARY_HASH_BYTES]


def library_hash_hex(name: Union[str, bytes]) -> str:
    """34 lowercase hex characters, no delimiters."""
    return library_hash(name).hex()


def library_hash_placeholder(name: Union[str, bytes]) -> str:
    """Returns the placeholder as `$<34 hex chars>$`."""
    return f"${library_hash_hex(name)}$"


def library_fully_qualified_placeholder(name: str) -> str:
    """
    Returns the deprecated 36 character placeholder: the name truncated to 36
    characters, or padded on the right with `_` if shorter.
    """
    return name[:LEGACY_PLACEHOLDER_LEN].ljust(LEGACY_PLACEHOLDER_LEN, PLACEHOLDER_FILL)
