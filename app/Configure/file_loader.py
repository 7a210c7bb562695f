"""
File Loading Service

Locates the bot's configuration file. A path that exists is used as given;
otherwise the file name is looked up in a list of conventional config
directories.

Features:
- Multi-path search for configuration files
- Flexible path configuration
"""

import os
from typing import List, Optional
from loguru import logger


class FileLoaderService:
    """Centralized service for finding files with multi-path search capability"""

    def __init__(self, search_paths: Optional[List[str]] = None):
        """
        Initialize file loader service

        Args:
            search_paths: List of paths to search for files (defaults to standard paths)
        """
        if search_paths is None:
            self.search_paths = self._get_default_search_paths()
        else:
            self.search_paths = search_paths

    def _get_default_search_paths(self) -> List[str]:
        """
        Get default search paths for configuration files

        Returns:
            List of paths to search in order of preference
        """
        # Get the project root directory
        module_dir = os.path.dirname(os.path.abspath(__file__))
        project_root = os.path.dirname(os.path.dirname(module_dir))

        current_dir = os.getcwd()

        return [
            current_dir,                               # Current working directory (highest priority)
            os.path.join(current_dir, "config"),       # cwd/config/
            os.path.join(current_dir, "configs"),      # cwd/configs/
            os.path.join(current_dir, "settings"),     # cwd/settings/
            os.path.join(project_root, "config"),      # project_root/config/
            os.path.join(project_root, "configs"),     # project_root/configs/
            os.path.join(project_root, "settings"),    # project_root/settings/
            project_root,                              # project_root/ (files directly in root)
        ]

    def find_file(self, filename: str) -> Optional[str]:
        """
        Find a file as given, then in the search paths

        Args:
            filename: Path or name of the file to find

        Returns:
            Full path to the file if found, None otherwise
        """
        if os.path.isfile(filename):
            return os.path.abspath(filename)
        if os.path.isabs(filename):
            return None

        for path in self.search_paths:
            file_path = os.path.join(path, filename)
            if os.path.isfile(file_path):
                logger.debug(f"Found '{filename}' at {file_path}")
                return file_path
        logger.warning(f"File '{filename}' not found in any search path")
        return None


# Global file loader instance
_file_loader = None


def get_file_loader() -> FileLoaderService:
    """Get global file loader instance"""
    global _file_loader
    if _file_loader is None:
        _file_loader = FileLoaderService()
    return _file_loader
