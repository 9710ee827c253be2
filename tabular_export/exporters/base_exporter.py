import logging
import os
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class BaseExporter:
    """
    Shared file handling for every exporter: extension resolution, directory
    creation and error logging. Subclasses set EXTENSION and implement write().
    """

    EXTENSION = ''

    def resolve_path(self, filename: str, directory: Optional[str] = None) -> str:
        """
        Appends the canonical extension when missing and, if a directory is given,
        creates it recursively and joins it with the filename.
        """
        if not filename.endswith(self.EXTENSION):
            filename = f"{filename}{self.EXTENSION}"

        if not directory:
            return filename

        try:
            os.makedirs(directory, mode=0o777, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating output directory '{directory}': {e}")
            raise
        return os.path.join(directory, filename)

    def export(self, grid: List[List[Any]], filename: str, directory: Optional[str] = None) -> str:
        """
        Writes the grid to filename (inside directory, if given) and returns the resolved path.
        """
        path = self.resolve_path(filename, directory)
        try:
            self.write(grid, path)
        except OSError as e:
            logger.error(f"Error writing '{path}': {e}")
            raise
        logger.info(f"Exported {len(grid)} rows to '{path}'")
        return path

    def write(self, grid: List[List[Any]], path: str) -> None:
        raise NotImplementedError("The write method must be implemented by a subclass.")
