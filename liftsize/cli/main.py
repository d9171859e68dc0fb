"""
Command-line interface for the elevator sizing estimator.

Usage:
    python -m liftsize estimate [--stops 2] [--load 400] [--travel 4] [--output report.json] [--readable]
    python -m liftsize estimate --input request.json
    python -m liftsize make-example [--output example_request.json]
    python -m liftsize summarize --input report.json
    python -m liftsize serve [--port 8000]
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from liftsize import __version__
from liftsize.cli.readable_output import print_readable_output, print_report_summary
from liftsize.config import get_settings
from liftsize.estimator.pipeline import estimate_request
from liftsize.logging_config import configure_logging
from liftsize.models.inputs import CalculationRequest
from liftsize.models.outputs import ErrorReport


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="liftsize",
        description="Elevator Sizing Estimator - preliminary sizing for residential traction "
                    "elevators. WARNING: advisory only, NOT a structural or code compliance check.",
    )
    parser.add_argument("--version", action="version", version=f"liftsize {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LIFTSIZE_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example request JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_request.json"),
        help="Output path for example file (default: example_request.json)",
    )

    # estimate command
    estimate_parser = subparsers.add_parser(
        "estimate",
        help="Run the sizing estimate",
    )
    estimate_parser.add_argument(
        "--input", "-i",
        type=Path,
        default=None,
        help="Path to JSON request file (overrides --stops/--load/--travel)",
    )
    estimate_parser.add_argument(
        "--stops",
        type=int,
        default=2,
        help="Number of stops (default: 2)",
    )
    estimate_parser.add_argument(
        "--load",
        type=float,
        default=400.0,
        help="Rated load in kg (default: 400)",
    )
    estimate_parser.add_argument(
        "--travel",
        type=float,
        default=4.0,
        help="Total travel in m (default: 4)",
    )
    estimate_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON report (prints to stdout if not specified)",
    )
    estimate_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a human-readable summary instead of JSON",
    )

    # summarize command
    summarize_parser = subparsers.add_parser(
        "summarize",
        help="Print a readable summary of a saved JSON report",
    )
    summarize_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to a report JSON file",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: LIFTSIZE_HOST or 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to listen on (default: LIFTSIZE_PORT or 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example request JSON file."""
    example = CalculationRequest(stops=3, rated_load_kg=450.0, travel_m=6.0)

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))

    print(f"Created example request file: {args.output}")
    print("\nRun the estimate with:")
    print(f"  python -m liftsize estimate --input {args.output}")

    return 0


def _load_request(args: argparse.Namespace) -> CalculationRequest:
    if args.input is None:
        return CalculationRequest(
            stops=args.stops,
            rated_load_kg=args.load,
            travel_m=args.travel,
        )
    with open(args.input) as f:
        return CalculationRequest(**json.load(f))


def cmd_estimate(args: argparse.Namespace) -> int:
    """Run the sizing estimate."""
    try:
        request = _load_request(args)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\nElevator Sizing Estimator", file=sys.stderr)
    print(
        f"Stops: {request.stops} | Load: {request.rated_load_kg:g} kg | "
        f"Travel: {request.travel_m:g} m",
        file=sys.stderr,
    )

    report = estimate_request(request)
    output_json = report.model_dump_json(indent=2)

    if args.output:
        with open(args.output, "w") as f:
            f.write(output_json)
        print(f"\nReport saved to {args.output}", file=sys.stderr)
    elif args.readable:
        print_report_summary(report.model_dump(mode="json"))
    else:
        print(output_json)

    if isinstance(report, ErrorReport):
        print("\nInvalid inputs:", file=sys.stderr)
        for err in report.errors:
            print(f"  - {err}", file=sys.stderr)
        return 1

    if report.warnings:
        print("\nWarnings:", file=sys.stderr)
        for w in report.warnings:
            print(f"  - {w}", file=sys.stderr)

    return 0


def cmd_summarize(args: argparse.Namespace) -> int:
    """Print a readable summary of a saved report."""
    try:
        print_readable_output(args.input)
        return 0
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    try:
        import uvicorn
    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1

    print("\nStarting Elevator Sizing API", file=sys.stderr)
    print(f"API: http://{host}:{port}/", file=sys.stderr)
    print(f"Docs: http://{host}:{port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "liftsize.api.server:app",
        host=host,
        port=port,
        reload=args.reload,
        log_config=None,
    )
    return 0


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "estimate": cmd_estimate,
        "summarize": cmd_summarize,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
