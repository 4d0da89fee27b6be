"""Utility modules for the codemod engine."""

from .string_utils import detect_quote, quote_string, replace_suffix, requote
from .file_utils import read_file, write_file, iter_source_files
from .logger import configure_logging, get_logger, set_log_level

__all__ = [
    "detect_quote",
    "quote_string",
    "replace_suffix",
    "requote",
    "read_file",
    "write_file",
    "iter_source_files",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
