"""Command line interface for sosfilter."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from . import __version__
from .analysis import frequency_response, magnitude_db
from .config import FilterConfig
from .filters.butterworth import BandType
from .logging_utils import configure_logging
from .samples import ingest_samples, write_samples


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _add_design_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, help="Filter configuration (YAML or JSON)")
    parser.add_argument("--order", type=int, help="Filter order")
    parser.add_argument(
        "--frequency",
        type=float,
        nargs="+",
        metavar="W",
        help="Critical angular frequency (two values for bandpass/bandstop)",
    )
    parser.add_argument(
        "--band-type",
        choices=[b.value for b in BandType],
        default=None,
        help="Band type (default: lowpass, or the config file's value)",
    )
    parser.add_argument("--fs", type=float, help="Sampling frequency")


def _load_filter_config(args: argparse.Namespace) -> FilterConfig:
    if args.config:
        cfg = FilterConfig.from_file(args.config)
        overrides = {
            "order": args.order,
            "critical_frequencies": args.frequency,
            "band_type": args.band_type,
            "sampling_frequency": args.fs,
        }
        updates = {k: v for k, v in overrides.items() if v is not None}
        return FilterConfig.from_mapping({**cfg.model_dump(), **updates}) if updates else cfg
    missing = [name for name, value in (("--order", args.order), ("--frequency", args.frequency), ("--fs", args.fs)) if value is None]
    if missing:
        raise SystemExit(f"Missing {', '.join(missing)} (or pass --config)")
    return FilterConfig(
        order=args.order,
        critical_frequencies=args.frequency,
        band_type=args.band_type or BandType.LOWPASS,
        sampling_frequency=args.fs,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sosfilter",
        description="Design Butterworth filters as second-order sections and run samples through them.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    design = subparsers.add_parser("design", help="Print the biquad coefficients of a filter")
    _add_design_arguments(design)
    design.add_argument("--output", type=Path, help="Write coefficients as JSON to this path")
    design.add_argument("--json", action="store_true", help="Emit coefficients as JSON to stdout")

    filt = subparsers.add_parser("filter", help="Filter a sample file through a new cascade")
    filt.add_argument("samples", type=Path, help="Samples (JSON list, JSONL or CSV)")
    _add_design_arguments(filt)
    filt.add_argument("--value-column", help="Column/key holding sample values")
    filt.add_argument("--output", type=Path, help="Write filtered samples (.csv or .json)")
    filt.add_argument("--json", action="store_true", help="Emit filtered samples as JSON to stdout")

    response = subparsers.add_parser("response", help="Print the magnitude response in dB")
    _add_design_arguments(response)
    response.add_argument("--points", type=int, default=16, help="Number of frequency bins")
    response.add_argument("--json", action="store_true", help="Emit response as JSON to stdout")

    subparsers.add_parser("version", help="Print the package version")
    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "design":
        cascade = _load_filter_config(args).build()
        payload = cascade.describe()
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            print(f"Wrote {len(cascade)} section(s) to {args.output}")
        elif args.json:
            _print_result(payload, as_json=True)
        else:
            for row in cascade.coefficients:
                print(" ".join(f"{c:.17g}" for c in row))
    elif args.command == "filter":
        cascade = _load_filter_config(args).build()
        samples = ingest_samples(args.samples, value_column=args.value_column)
        filtered = cascade.process(samples).tolist()
        if args.output:
            write_samples(args.output, filtered)
            print(f"Filtered {len(filtered)} samples into {args.output}")
        else:
            _print_result(filtered, as_json=args.json)
    elif args.command == "response":
        cascade = _load_filter_config(args).build()
        freqs, resp = frequency_response(cascade.coefficients, cascade.sampling_frequency, args.points)
        rows = [{"frequency": float(f), "magnitude_db": float(m)} for f, m in zip(freqs, magnitude_db(resp))]
        if args.json:
            _print_result(rows, as_json=True)
        else:
            for row in rows:
                print(f"{row['frequency']:12.4f} {row['magnitude_db']:10.3f}")
    elif args.command == "version":
        print(__version__)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs or None)
    try:
        _run(args)
    except (OSError, ValueError, ArithmeticError, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
