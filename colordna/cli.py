"""Command-line interface: colour sequence files, list and preview colour schemes."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
from pathlib import Path
from typing import IO, Iterable, Iterator, Sequence

from colordna.colorer import Colorer
from colordna.config import ColorScheme, ConfigError, load
from colordna.parser import (
    Format,
    detect_format_from_content,
    detect_format_from_filename,
    is_quality_line,
    is_sequence_line,
)

__all__ = [
    "format_line",
    "is_sequence_countable_line",
    "process_stream",
    "show_scheme_preview",
    "main",
]

_DETECTION_LINES = 10

_PREVIEW_DNA = "ATGCGATCGATCGTAG"
_PREVIEW_RNA = "AUGCGAUCGAUCGUAG"
_PREVIEW_QUALITY = "!\"#)*+./:9?EFIJK"

_DESCRIPTION = """\
colordna is a command-line tool that colorizes DNA/RNA sequences and quality scores
for better visualization in the terminal. It supports multiple file formats including
FASTA, FASTQ, SAM, and VCF with automatic format detection.

Features:
- Automatic file format detection (FASTA, FASTQ, SAM, VCF)
- Multiple color schemes with customizable colors
- Support for both sequence and quality score coloring
- Pipe support for streaming data
- Custom color scheme configuration

Commands:
  preview [scheme-name]  Preview a color scheme (all schemes if none is given)
  schemes                List available color schemes

Examples:
  colordna sequences.fasta
  colordna --scheme bright sequences.fastq
  cat file.sam | colordna
  colordna file1.fasta file2.fastq"""


class _CommandError(Exception):
    """A command failed; the message is reported to the user."""


def _log(message: str) -> None:
    print(message, file=sys.stderr)


def format_line(line: str, fmt: Format, colorizer: Colorer) -> str:
    """Return the line as it is printed for the given format."""
    if fmt is Format.FASTA:
        if line.startswith(">"):
            return line
        return colorizer.colorize_sequence(line)
    if fmt is Format.FASTQ:
        if line.startswith(("@", "+")):
            return line
        if is_sequence_line(line):
            return colorizer.colorize_sequence(line)
        if is_quality_line(line):
            return colorizer.colorize_quality(line)
        return line
    if fmt is Format.SAM:
        if line.startswith("@"):
            return line
        return colorizer.colorize_sam(line)
    if fmt is Format.VCF:
        if line.startswith("#"):
            return line
        return colorizer.colorize_vcf(line)
    return line


def is_sequence_countable_line(line: str, fmt: Format) -> bool:
    """Return True if the line starts a new record in the given format."""
    if fmt is Format.FASTA:
        return line.startswith(">")
    if fmt is Format.FASTQ:
        return line.startswith("@") and not line.startswith("+")
    if fmt is Format.SAM:
        return not line.startswith("@") and line.count("\t") >= 10
    if fmt is Format.VCF:
        return not line.startswith("#")
    return False


def _strip_newlines(stream: Iterable[str]) -> Iterator[str]:
    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        yield raw


def process_stream(
    stream: Iterable[str],
    colorizer: Colorer,
    filename: str = "",
    out: IO[str] | None = None,
    verbose: bool = False,
) -> tuple[int, int]:
    """Colour every line of the stream and write it out.

    The format comes from the filename's extension, or else from the first
    lines. Returns the number of lines and of records processed. Raises
    ValueError if the format cannot be detected.
    """
    if out is None:
        out = sys.stdout
    lines = _strip_newlines(stream)
    head = list(itertools.islice(lines, _DETECTION_LINES))

    fmt = Format.UNKNOWN
    if filename:
        fmt = detect_format_from_filename(filename)
        if verbose:
            if fmt is not Format.UNKNOWN:
                _log(f"Format detected from filename: {fmt}")
            else:
                _log("Could not detect format from filename, analyzing content...")
    if fmt is Format.UNKNOWN and head:
        fmt = detect_format_from_content(head)
    if fmt is Format.UNKNOWN:
        raise ValueError("could not detect format from content")
    if verbose:
        _log(f"Format detected from content: {fmt}")

    line_count = 0
    sequence_count = 0
    for line in itertools.chain(head, lines):
        print(format_line(line, fmt, colorizer), file=out)
        line_count += 1
        if is_sequence_countable_line(line, fmt):
            sequence_count += 1

    if verbose:
        _log(f"Processed {line_count} lines, {sequence_count} sequences")
    return line_count, sequence_count


def show_scheme_preview(scheme: ColorScheme, out: IO[str] | None = None) -> None:
    """Write sample DNA, RNA and quality lines in the given scheme."""
    if out is None:
        out = sys.stdout
    colorizer = Colorer(scheme)
    print(f"DNA:     {colorizer.colorize_sequence(_PREVIEW_DNA)}", file=out)
    print(f"RNA:     {colorizer.colorize_sequence(_PREVIEW_RNA)}", file=out)
    legends = {"gradient": "Poor -> Good Quality", "mono": "Dim -> Bold Quality"}
    legend = legends.get(scheme.quality)
    if legend is not None:
        print(f"Quality: {colorizer.colorize_quality(_PREVIEW_QUALITY)}", file=out)
        print(f"         {legend}", file=out)


def _default_config_path() -> str:
    try:
        home = str(Path.home())
    except RuntimeError:
        home = ""
    return os.path.join(home, ".colordna.yaml")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colordna",
        usage="colordna [options] [file...] | preview [scheme-name] | schemes",
        description="Color DNA/RNA sequences and quality scores in terminal output",
        epilog=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=_default_config_path(), help="config file")
    parser.add_argument("-s", "--scheme", default="bright", help="color scheme to use")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("args", nargs="*", metavar="file", help="input files")
    return parser


def _load_config(path: str, verbose: bool = False):
    try:
        return load(path, verbose)
    except ConfigError as exc:
        raise _CommandError(f"failed to load config: {exc}") from exc


def _run_colordna(options: argparse.Namespace, files: Sequence[str]) -> None:
    verbose = options.verbose
    if verbose:
        _log(f"Loading configuration from: {options.config}")
    config = _load_config(options.config, verbose)
    if verbose:
        _log("Configuration loaded successfully")
        _log(f"Available color schemes: {', '.join(config.color_schemes)}")

    scheme = config.color_schemes.get(options.scheme)
    if scheme is None:
        raise _CommandError(f"color scheme '{options.scheme}' not found")
    if verbose:
        _log(f"Using color scheme: {options.scheme}")

    colorizer = Colorer(scheme)

    if not files:
        if verbose:
            _log("Reading from standard input")
        try:
            process_stream(sys.stdin, colorizer, "", sys.stdout, verbose)
        except ValueError as exc:
            raise _CommandError(str(exc)) from exc
        except OSError as exc:
            raise _CommandError(f"error reading input: {exc}") from exc
        return

    total = len(files)
    if verbose:
        _log(f"Processing {total} file(s)")
    for number, filename in enumerate(files, start=1):
        if verbose:
            _log(f"[{number}/{total}] Processing file: {filename}")
        try:
            with open(filename, encoding="utf-8", errors="replace", newline="\n") as handle:
                process_stream(handle, colorizer, filename, sys.stdout, verbose)
        except (OSError, ValueError) as exc:
            if verbose:
                _log(f"Error processing {filename}: {exc}")
            continue
        if verbose:
            _log(f"[{number}/{total}] Completed: {filename}")


def _run_preview(options: argparse.Namespace, names: Sequence[str]) -> None:
    config = _load_config(options.config)
    if names:
        name = names[0]
        scheme = config.color_schemes.get(name)
        if scheme is None:
            raise _CommandError(f"color scheme '{name}' not found")
        print(f"Color scheme: {name}")
        print("-" * 40)
        show_scheme_preview(scheme)
        return

    print("Available color schemes:")
    print("=" * 50)
    for name, scheme in config.color_schemes.items():
        current = " (current)" if name == options.scheme else ""
        print(f"\nScheme: {name}{current}")
        print("-" * 40)
        show_scheme_preview(scheme)


def _run_schemes(options: argparse.Namespace) -> None:
    config = _load_config(options.config)
    print("Available color schemes:")
    print()
    for name in sorted(config.color_schemes):
        scheme = config.color_schemes[name]
        status = " (default)" if name == options.scheme else ""
        kind = " [background colors]" if scheme.background else " [font colors only]"
        print(f"  {name}{status}{kind}")
    print()
    print(f"Current default: {options.scheme}")
    print("Use 'colordna preview [scheme-name]' to see how a scheme looks.")
    print("Use 'colordna --scheme [scheme-name]' to use a different scheme.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    options = _build_parser().parse_intermixed_args(argv)
    args = list(options.args)
    try:
        if args and args[0] == "preview":
            _run_preview(options, args[1:])
        elif args and args[0] == "schemes":
            _run_schemes(options)
        else:
            _run_colordna(options, args)
    except _CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())