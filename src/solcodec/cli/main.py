"""Main CLI entry point for solcodec."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file
from ..exceptions import UnknownInstructionError


def identify(program_name: str, hex_data: str) -> int:
    """Classify hex instruction data against a built-in program.

    Returns:
        Exit code (0 when identified, 1 otherwise)
    """
    from ..programs import PROGRAMS

    program = PROGRAMS.get(program_name)
    if program is None:
        print(
            f"Error: Unknown program {program_name!r}. Known programs: {', '.join(sorted(PROGRAMS))}",
            file=sys.stderr,
        )
        return 1

    try:
        data = bytes.fromhex(hex_data)
    except ValueError as e:
        print(f"Error: Invalid hex data: {e}", file=sys.stderr)
        return 1

    try:
        instruction_class = program.identify_instruction(data)
    except UnknownInstructionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{program.name}: {instruction_class.record_name()}")
    return 0


def main() -> int:
    """Main entry point for the solcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="solcodec: Fixed-layout account and instruction codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  solcodec --analyze records.py          Show record layouts
  solcodec --identify counter 01         Identify instruction data
  solcodec --version                     Show version
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze record layouts and show field offsets",
    )

    parser.add_argument(
        "--identify",
        nargs=2,
        metavar=("PROGRAM", "HEX"),
        help="Identify hex instruction data against a built-in program",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"solcodec {__version__}",
    )

    args = parser.parse_args()

    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    if args.identify:
        program_name, hex_data = args.identify
        return identify(program_name, hex_data)

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
