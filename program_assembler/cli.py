"""Command-line interface for the program assembler.

WHY: The compiler driver needs a single command that takes a front end's
hand-off (a JSON document or a pair of listing files), splices the
literal pool into the instruction stream, and writes the merged program
where the next tool expects it.

HOW: Uses argparse to accept one or more input files, an optional
adapter override, emitter selection, and an output directory. Each input
is translated into a TranslationUnit by its adapter, assembled, and run
through the selected emitters. With --stdout the plain-text program is
written to stdout instead, one line per record. Status messages go to
stderr; output files are saved next to the input (or to --output-dir).

RULES:
- Positional arguments: one or more input files (.json or .text)
- --adapter overrides extension-based adapter selection
- --formats: comma-separated emitter keys (default: DEFAULT_EMITTER)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (hello-2.ll)
- A unit that fails translation, assembly or saving leaves no output behind
- Remaining inputs are still processed; exit status is 1 if any unit failed
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from program_assembler.adapters import ADAPTERS, adapter_for_path
from program_assembler.config import DEFAULT_EMITTER, LOG_LEVEL, SUPPORTED_INPUT_SUFFIXES
from program_assembler.core.assembler import assemble_unit
from program_assembler.formatters import EMITTERS
from program_assembler.formatters.base import EmitterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Re-running the assembler over the same input must not silently
    overwrite a previous program image.

    RULES:
    - First attempt: {stem}{suffix} (e.g. hello.ll)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. hello-2.ll, hello-listing-2.json)
    - Counter starts at 2 and increments

    Args:
        stem: Input filename stem (without extension).
        suffix: Emitter's suffix (e.g. ".ll").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # ".ll" → ("", ".ll"); "-listing.json" → ("-listing", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx >= 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: EmitterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single emitter output to disk as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _remove_partial(paths: list[Path]) -> None:
    """Delete outputs already written for a unit whose save did not finish."""
    for path in paths:
        try:
            path.unlink()
        except OSError:
            logger.warning("Could not remove partial output %s", path)


def _parse_formats(formats: Optional[str]) -> list[str]:
    """Split and check the --formats value.

    Raises:
        ValueError: If a key is not registered in EMITTERS.
    """
    if not formats:
        return [DEFAULT_EMITTER]
    keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in keys:
        if key not in EMITTERS:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(EMITTERS)),
                )
            )
    return keys


def _process_input(
    input_path: Path,
    args: argparse.Namespace,
    format_keys: list[str],
) -> list[Path]:
    """Translate, assemble and emit one input file.

    Every output is rendered in memory before anything is written, so a
    failing unit leaves nothing behind.

    Returns:
        Paths of the saved files (empty with --stdout).

    Raises:
        ValueError: TranslationError or PreconditionViolation for this unit,
            or a missing/unsupported input file.
        OSError: An output could not be written; files already saved for
            this unit are removed first.
    """
    if not input_path.is_file():
        raise ValueError("File not found: {}".format(input_path))

    if args.adapter is None and input_path.suffix.lower() not in SUPPORTED_INPUT_SUFFIXES:
        raise ValueError(
            "Unsupported input type '{}'. Supported inputs: {}".format(
                input_path.suffix, ", ".join(sorted(SUPPORTED_INPUT_SUFFIXES)),
            )
        )

    adapter = adapter_for_path(input_path, args.adapter)
    _status("Assembling {} ({})...".format(input_path.name, adapter.name))

    unit = adapter.translation_unit()
    program = assemble_unit(unit)
    _status("  {} instruction line(s), {} literal(s)".format(
        len(unit.instructions), len(unit.literals),
    ))

    if args.stdout:
        sys.stdout.write(program.text())
        sys.stdout.flush()
        return []

    outputs: list[EmitterOutput] = []
    for key in format_keys:
        emitter = EMITTERS[key]()
        outputs.extend(emitter.format(program))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    saved: list[Path] = []
    try:
        for output in outputs:
            path = _save_output(output, input_path.stem, output_dir)
            saved.append(path)
            _status("  Saved: {}".format(path.name))
    except OSError:
        _remove_partial(saved)
        raise
    return saved


def run(args: argparse.Namespace) -> int:
    """Process every input and return the process exit status."""
    try:
        format_keys = _parse_formats(args.formats)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    if args.output_dir and not Path(args.output_dir).is_dir():
        print("Error: Output directory does not exist: {}".format(args.output_dir), file=sys.stderr)
        return 1

    failures = 0
    saved_files: list[Path] = []
    for name in args.input_files:
        input_path = Path(name).resolve()
        try:
            saved_files.extend(_process_input(input_path, args, format_keys))
        except (ValueError, OSError) as e:
            # TranslationError, PreconditionViolation, bad input path, write failure
            logger.debug("Assembly failed for %s", input_path, exc_info=True)
            print("Error: {}: {}".format(input_path.name, e), file=sys.stderr)
            failures += 1

    if not args.stdout:
        _status("")
        _status("Done! Saved {} file(s), {} input(s) failed.".format(len(saved_files), failures))

    return 1 if failures else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without running
    the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="program-assembler",
        description="Splice a front end's string-literal pool into its "
                    "instruction stream and write the merged program.",
    )

    parser.add_argument(
        "input_files",
        nargs="+",
        help="Hand-off inputs: JSON documents (.json) or instruction listings (.text).",
    )

    parser.add_argument(
        "--adapter",
        choices=sorted(ADAPTERS.keys()),
        default=None,
        help="Front-end adapter to use (default: chosen by file extension).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(", ".join(sorted(EMITTERS.keys())), DEFAULT_EMITTER),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the merged program to stdout instead of saving files.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s).",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for ``program-assembler`` and ``python -m program_assembler``.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
