"""
File utility functions.

Files are read and written with ``newline=""`` so that CRLF line endings
survive a round trip untouched.
"""

import glob
import os
from typing import Iterable, Iterator, Optional, Tuple
from .logger import get_logger

logger = get_logger(__name__)

JS_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs")
CSS_EXTENSIONS = (".css",)
SOURCE_EXTENSIONS = JS_EXTENSIONS + CSS_EXTENSIONS


def read_file(file_path: str) -> Optional[str]:
    """
    Read content from a file.

    Args:
        file_path: Path to the file

    Returns:
        File content as string, or None if error
    """
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read file {file_path}: {e}")
        return None


def write_file(file_path: str, content: str) -> bool:
    """
    Write content to a file.

    Args:
        file_path: Path to the file
        content: Content to write

    Returns:
        True if successful, False otherwise
    """
    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug(f"Successfully wrote file: {file_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to write file {file_path}: {e}")
        return False


def iter_source_files(
    paths: Iterable[str],
    pattern: str = "**/*",
    extensions: Tuple[str, ...] = SOURCE_EXTENSIONS,
) -> Iterator[str]:
    """
    Expand files and directories into the source files to migrate.

    Files given explicitly are yielded as-is; directories are searched
    recursively with ``pattern`` and filtered by extension. Each path is
    yielded once, in sorted order per directory.
    """
    seen = set()
    for path in paths:
        if os.path.isdir(path):
            matches = sorted(glob.glob(os.path.join(path, pattern), recursive=True))
            candidates = [
                m for m in matches
                if os.path.isfile(m) and m.endswith(extensions)
                and "node_modules" not in m.split(os.sep)
            ]
        else:
            candidates = [path]

        for candidate in candidates:
            if candidate in seen:
                continue
            seen.add(candidate)
            yield candidate
