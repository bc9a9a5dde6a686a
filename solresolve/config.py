import os
import sys
import logging
from pathlib import Path
from typing import List, Optional, Set
from dotenv import load_dotenv

# Load environment variables from .env file in the working directory
load_dotenv()

# --- Library Roots ---
# Ordered, first match wins
LIB_PATHS: List[Path] = [
    Path(p) for p in os.getenv("SOLC_LIB_PATHS", "lib").split(os.pathsep) if p
] or [Path("lib")]

# --- Installed Compilers ---
SVM_HOME = Path(os.getenv("SVM_HOME") or Path.home() / ".svm")

# --- Source Configuration ---
SOURCE_EXTENSIONS: Set[str] = {".sol", ".yul"}

# Library repositories conventionally keep their sources under <lib>/<name>/src
LIBRARY_SOURCE_DIR = "src"

# --- Link Placeholders ---
LIBRARY_HASH_BYTES = 17
LEGACY_PLACEHOLDER_LEN = 36
PLACEHOLDER_FILL = "_"

# --- Logging ---
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.getenv("SOLRESOLVE_LOG_LEVEL", "WARNING").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None):
    """Configures root logging on stderr. Only entry points should call this."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
