"""
Demo script: convert text files via the public API.

Usage:
    uv run python scripts/run_convert.py inputs/app.yaml                 # -> outputs/app.json
    uv run python scripts/run_convert.py inputs/albums.csv --to parquet
    uv run python scripts/run_convert.py inputs/data.txt --from flat_file --config convert.yaml

Each input gets an output file under outputs/ with the same stem. The
input format is inferred from the suffix unless --from is given; the
output format defaults to JSON.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

_OUTPUT_SUFFIXES = {
    "json": ".json",
    "parquet": ".parquet",
    "csv": ".csv",
    "flat_file": ".txt",
    "ini": ".ini",
}

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_convert")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert YAML / flat-file / INI text files.")
    parser.add_argument("inputs", nargs="+", help="Input files")
    parser.add_argument("--from", dest="input_format", default=None, help="Input format name")
    parser.add_argument(
        "--to",
        dest="output_format",
        default="json",
        choices=sorted(_OUTPUT_SUFFIXES),
        help="Output format (default: json)",
    )
    parser.add_argument("--config", default=None, help="Converter config YAML file")
    parser.add_argument("--output-dir", default=str(OUTPUT_ROOT), help="Output directory")
    return parser


def main(argv: list[str] | None = None) -> int:
    import formatbridge

    args = _build_arg_parser().parse_args(argv)
    config = formatbridge.load_config(args.config) if args.config else None
    output_dir = Path(args.output_dir)

    failures = 0
    for input_path in args.inputs:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        output_path = output_dir / (Path(input_path).stem + _OUTPUT_SUFFIXES[args.output_format])
        log.info("Converting %s -> %s", input_path, output_path)
        try:
            formatbridge.convert_file(
                input_path,
                output_path,
                input_format=args.input_format,
                output_format=args.output_format,
                config=config,
            )
        except formatbridge.FormatBridgeError as exc:
            log.error("FAILED  %s: %s", input_path, exc)
            failures += 1

    log.info("All files processed (%d failure(s)).", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
