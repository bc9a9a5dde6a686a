from abc import ABC, abstractmethod
from typing import Optional
from pathlib import Path

class ImportResolver(ABC):
    """
    Abstract base class for import resolution strategies.
    Responsible for mapping import strings (e.g. 'import "./Token.sol";')
    to physical file paths on disk.
    """

    @abstractmethod
    def resolve(self, source_file: str, import_string: str, project_root: Optional[Path] = None) -> Optional[str]:
        """
        Resolves an import string to a file path.

        Args:
            source_file: The path of the file containing the import.
            import_string: The raw string from the import statement
                           (e.g., "./Token.sol", "forge-std/Test.sol", "src/interfaces/IConfig.sol").
            project_root: The project base directory.

        Returns:
            POSIX path of the resolved file, or None if resolution fails.
        """
        pass
