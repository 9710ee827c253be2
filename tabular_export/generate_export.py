# tabular_export/generate_export.py
# Command-line entry point: loads records from a JSON file and writes one export.

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, List, Optional

from .builders.grid_builder import GridBuilder
from .config.config_loader import ExportConfigLoader
from .config.models import ExportProfile

logger = logging.getLogger(__name__)

FORMATS = ('csv', 'xlsx', 'json')


class ColoredFormatter(logging.Formatter):
    """
    INFO records print the message only, every other level adds the source location.
    Level names are coloured unless use_color is False (e.g. output redirected to a file).
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',      # Cyan
        logging.WARNING: '\033[33m',    # Yellow
        logging.ERROR: '\033[31m',      # Red
        logging.CRITICAL: '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    PLAIN_FORMAT = '>>> %(levelname)s >>> %(message)s'
    LOCATED_FORMAT = '>>> %(levelname)s >>> [%(filename)s:%(lineno)d in %(funcName)s()] %(message)s'

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color
        self._plain = logging.Formatter(self.PLAIN_FORMAT)
        self._located = logging.Formatter(self.LOCATED_FORMAT)

    def format(self, record):
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.use_color and color:
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        formatter = self._plain if record.levelno == logging.INFO else self._located
        return formatter.format(record)


def _stream_is_tty(stream) -> bool:
    return hasattr(stream, 'isatty') and stream.isatty()


def configure_logging(log_level: int) -> None:
    """
    INFO/DEBUG -> stdout, WARNING/ERROR/CRITICAL -> stderr.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.setFormatter(ColoredFormatter(use_color=_stream_is_tty(sys.stdout)))
    stdout_handler.addFilter(lambda record: record.levelno <= logging.INFO)
    root_logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ColoredFormatter(use_color=_stream_is_tty(sys.stderr)))
    root_logger.addHandler(stderr_handler)


def load_records(data_path: Path) -> List[Any]:
    """Loads a JSON list of records (lists or objects)."""
    logger.info(f"Loading records from: {data_path}")
    with open(data_path, 'r', encoding='utf-8') as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON list of records in {data_path}, got {type(records).__name__}")
    return records


def build_grid(records: List[Any], profile: ExportProfile) -> GridBuilder:
    """Creates a builder holding the records plus the profile's header, footer, index and merges."""
    builder = GridBuilder()
    builder.load_from_records(records)
    builder.set_header(profile.header)
    builder.set_footer(profile.footer)
    builder.set_index_list(profile.index_list)
    builder.set_merge_regions(profile.merge_regions)
    return builder


def run_export(builder: GridBuilder, profile: ExportProfile, export_format: str, filename: str,
               directory: Optional[str], include_index_start: bool, include_index_end: bool) -> str:
    if export_format == 'csv':
        return builder.export_csv(filename, directory, include_index_start, include_index_end, options=profile.csv)
    if export_format == 'xlsx':
        return builder.export_excel(filename, directory, include_index_start, include_index_end, options=profile.excel)
    if export_format == 'json':
        return builder.export_json(filename, directory, include_index_start, include_index_end, options=profile.json_options)
    raise ValueError(f"Unsupported export format: '{export_format}'")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to orchestrate a single export."""
    start_time = time.time()

    parser = argparse.ArgumentParser(description="Export a JSON list of records to CSV, XLSX or JSON.")
    parser.add_argument("input_data_file", help="Path to the input JSON file (a list of records).")
    parser.add_argument("-f", "--format", choices=FORMATS, default='csv', help="Output format (default: csv).")
    parser.add_argument("-o", "--output", default="export", help="Output file name; the extension is added if missing.")
    parser.add_argument("-d", "--directory", default=None, help="Output directory, created if it does not exist.")
    parser.add_argument("-c", "--config", default=None, help="Path to an export profile JSON file.")
    parser.add_argument("--index-start", action="store_true", help="Add the index row before the data.")
    parser.add_argument("--index-end", action="store_true", help="Add the index row after the data.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging (shows all DEBUG messages).")
    parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO', help="Set logging level (default: INFO).")
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else getattr(logging, args.log_level, logging.INFO)
    configure_logging(log_level)

    logger.info("=== Starting Export ===")
    logger.debug(f"Arguments: {vars(args)}")

    try:
        profile = ExportConfigLoader(args.config).get_profile() if args.config else ExportProfile()
        records = load_records(Path(args.input_data_file))
        builder = build_grid(records, profile)
        output_path = run_export(
            builder,
            profile,
            args.format,
            args.output,
            args.directory or profile.output_dir,
            args.index_start or profile.include_index_start,
            args.index_end or profile.include_index_end,
        )
    except Exception as e:
        logger.error(f"Export failed: {e}")
        return 1

    logger.info(f"Export written: '{output_path}'")
    logger.info(f"Total Time: {time.time() - start_time:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
