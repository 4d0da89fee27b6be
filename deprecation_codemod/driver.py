"""
Command line driver that applies a codemod to files on disk.

Each file is read, run through the JS or CSS transform according to its
extension, and written back when it changed. A file that fails to read or
transform is reported and left untouched; the remaining files are still
processed.
"""

import argparse
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import PrintOptions, TransformOptions
from .errors import CodemodError, ExitCode, ParseError, format_error
from .transformer.css_transformer import CssProcessor, DeprecatedClassesPlugin
from .transformer.deprecations import Codemod, available_codemods, get_codemod
from .transformer.js_transformer import JSTransformer
from .transformer.result import TransformStatus
from .utils.file_utils import CSS_EXTENSIONS, JS_EXTENSIONS, iter_source_files, read_file, write_file
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

FAILED = "failed"
SKIPPED = "skipped"


@dataclass
class FileOutcome:
    path: str
    status: str
    edit_count: int = 0
    error: Optional[str] = None
    output: Optional[str] = None


@dataclass
class DriverReport:
    outcomes: List[FileOutcome] = field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def failed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == FAILED]

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.FILE_ERROR if self.failed else ExitCode.SUCCESS


# ---------------------------
# Driver Class
# ---------------------------

class Driver:
    """Applies one codemod to a set of files."""

    def __init__(
        self,
        codemod: Codemod,
        options: Optional[TransformOptions] = None,
        dry_run: bool = False,
        jobs: int = 1,
    ):
        """
        Initialize the driver.

        Args:
            codemod: The migration to apply
            options: Print options for rewritten JS nodes
            dry_run: Report changes without writing files
            jobs: Number of worker threads
        """
        self.codemod = codemod
        self.options = options or TransformOptions()
        self.dry_run = dry_run
        self.jobs = max(1, jobs)
        self.js_transformer = JSTransformer(codemod)
        self.css_processor = CssProcessor([DeprecatedClassesPlugin(codemod)])

    def run(self, paths: Sequence[str], pattern: str = "**/*") -> DriverReport:
        files = list(iter_source_files(paths, pattern))
        logger.info(f"Applying {self.codemod.name} to {len(files)} files")

        if self.jobs == 1 or len(files) <= 1:
            outcomes = [self.apply_file(path) for path in files]
        else:
            # map() keeps input order
            with ThreadPoolExecutor(max_workers=self.jobs) as executor:
                outcomes = list(executor.map(self.apply_file, files))

        report = DriverReport(outcomes=outcomes)
        logger.info(
            f"Done: {report.count(TransformStatus.CHANGED.value)} changed, "
            f"{report.count(TransformStatus.UNCHANGED.value)} unchanged, "
            f"{report.count(SKIPPED)} skipped, {len(report.failed)} failed"
        )
        return report

    def apply_file(self, path: str) -> FileOutcome:
        if not path.endswith(JS_EXTENSIONS + CSS_EXTENSIONS):
            logger.debug(f"Skipping {path}: unsupported extension")
            return FileOutcome(path, SKIPPED)

        source = read_file(path)
        if source is None:
            return FileOutcome(path, FAILED, error=f"Could not read file: {path}")

        try:
            if path.endswith(CSS_EXTENSIONS):
                result = self.css_processor.process(source, path)
            else:
                result = self.js_transformer.transform(source, self.options, path)
        except ParseError as e:
            logger.error(f"Parse failed: {e.message}")
            return FileOutcome(path, FAILED, error=e.message)
        except CodemodError as e:
            logger.error(f"Transform failed for {path}: {e.message}")
            return FileOutcome(path, FAILED, error=e.message)
        except Exception as e:
            logger.exception(f"Unexpected error while transforming {path}")
            return FileOutcome(path, FAILED, error=f"{type(e).__name__}: {e}")

        if result.changed and not self.dry_run:
            if not write_file(path, result.output):
                return FileOutcome(path, FAILED, error=f"Could not write file: {path}")

        return FileOutcome(
            path,
            result.status.value,
            edit_count=result.edit_count,
            output=result.output if result.changed else None,
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deprecation-codemod",
        description="Migrate deprecated component class names in JS/JSX and CSS files",
    )
    parser.add_argument("codemod", help=f"Codemod to apply ({', '.join(available_codemods())})")
    parser.add_argument("paths", nargs="+", help="Files or directories to transform")
    parser.add_argument("--glob", default="**/*", help="Pattern used to expand directories")
    parser.add_argument("--dry-run", action="store_true", help="Print changed files instead of writing them")
    parser.add_argument("--quote", choices=["single", "double", "auto"], default="auto",
                        help="Quote style for rewritten string literals")
    parser.add_argument("--trailing-comma", action="store_true", help="Trailing comma style for printed nodes")
    parser.add_argument("--jobs", type=int, default=1, help="Number of files processed in parallel")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        codemod = get_codemod(args.codemod)
        options = TransformOptions(
            print_options=PrintOptions(quote=args.quote, trailing_comma=args.trailing_comma)
        )
    except CodemodError as e:
        print(format_error(e), file=sys.stderr)
        return int(e.exit_code)

    missing = [path for path in args.paths if not os.path.exists(path)]
    if missing:
        print(format_error(CodemodError(f"No such file or directory: {', '.join(missing)}")), file=sys.stderr)
        return int(ExitCode.INVALID_ARGS)

    driver = Driver(codemod, options, dry_run=args.dry_run, jobs=args.jobs)
    report = driver.run(args.paths, args.glob)

    for outcome in report.outcomes:
        if outcome.status == FAILED:
            print(f"FAILED     {outcome.path}: {outcome.error}", file=sys.stderr)
        elif outcome.status == TransformStatus.CHANGED.value:
            print(f"CHANGED    {outcome.path} ({outcome.edit_count} edits)")
            if args.dry_run:
                print(outcome.output)

    return int(report.exit_code)


if __name__ == "__main__":
    sys.exit(main())
