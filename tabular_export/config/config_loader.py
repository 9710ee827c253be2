# tabular_export/config/config_loader.py
"""
Config Loader for Export Profiles

Loads a JSON export profile and exposes its sections as validated option models.

Profile Structure (camelCase or snake_case keys):
    - outputDir: directory exports are written to
    - includeIndexStart / includeIndexEnd: index row placement
    - header / footer: lists of rows rendered around the data block
    - indexList: values of the index row
    - mergeRegions: spreadsheet ranges to merge, e.g. "A1:C1"
    - csv / excel / json: per-format options
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .models import CsvOptions, ExcelOptions, ExportProfile, JsonOptions

logger = logging.getLogger(__name__)


class ExportConfigLoader:
    """
    Loads and validates an export profile file.
    """

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the export profile JSON file
        """
        self.config_path = Path(config_path)
        self._profile: Optional[ExportProfile] = None

        self._load()

    def _load(self) -> None:
        """Load and validate the profile file."""
        logger.info(f"Loading export profile from: {self.config_path}")
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                raw_config = json.load(f)
            self._profile = ExportProfile(**raw_config)
            logger.info("Export profile loaded successfully.")
        except Exception as e:
            logger.error(f"Error loading export profile {self.config_path}: {e}")
            raise

    # --- Public Interface ---

    def get_profile(self) -> ExportProfile:
        return self._profile

    def get_csv_options(self) -> CsvOptions:
        return self._profile.csv

    def get_excel_options(self) -> ExcelOptions:
        return self._profile.excel

    def get_json_options(self) -> JsonOptions:
        return self._profile.json_options

    def get_header(self) -> List[List[Any]]:
        return self._profile.header

    def get_footer(self) -> List[List[Any]]:
        return self._profile.footer

    def get_index_list(self) -> List[Any]:
        return self._profile.index_list

    def get_merge_regions(self) -> List[str]:
        return self._profile.merge_regions

    def get_output_dir(self) -> Optional[str]:
        return self._profile.output_dir
