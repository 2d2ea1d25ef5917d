"""
Command-line access to the hexagonal cell index.

Usage:
    python scripts/hexindex_cli.py encode 37.7749 -122.4194
    python scripts/hexindex_cli.py encode 37.7749 -122.4194 --resolution 5
    python scripts/hexindex_cli.py decode 8928308280fffff
    python scripts/hexindex_cli.py bounds 8928308280fffff

Exits with status 1 and the error message on stderr for invalid input.
"""
import argparse
import os
import sys

# Add the src directory to path so the package imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from hexindex.errors import HexIndexError
from hexindex.grid import DEFAULT_RESOLUTION, cell_to_bounds, cell_to_latlon, latlon_to_cell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert between lat/lon and hexagon cell IDs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Cell ID containing a lat/lon")
    encode.add_argument("lat", type=float, help="Latitude in degrees")
    encode.add_argument("lon", type=float, help="Longitude in degrees")
    encode.add_argument(
        "--resolution", "-r",
        type=int,
        default=DEFAULT_RESOLUTION,
        help=f"Grid resolution 0-15 (default: {DEFAULT_RESOLUTION})"
    )

    decode = subparsers.add_parser("decode", help="Center lat/lon of a cell ID")
    decode.add_argument("cell_id", help="Cell ID as hex")

    bounds = subparsers.add_parser("bounds", help="Bounding box of a cell ID")
    bounds.add_argument("cell_id", help="Cell ID as hex")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "encode":
            print(latlon_to_cell(args.lat, args.lon, args.resolution))
        elif args.command == "decode":
            lat, lon = cell_to_latlon(args.cell_id)
            print(f"{lat:.10f} {lon:.10f}")
        else:
            b = cell_to_bounds(args.cell_id)
            print(f"lat [{b.min_lat:.10f}, {b.max_lat:.10f}] lon [{b.min_lon:.10f}, {b.max_lon:.10f}]")
    except HexIndexError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
