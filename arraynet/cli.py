"""Command line entry point: packetize an integer array and print the packets."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from arraynet.packetize import packetize_array

_DEFAULT_ARRAY = [-6, 823, 9, 1888, 0, -17, 9999999, -888888, 723, 1000, 1111]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arraynet",
        description="Split integers into ArrayNet packets and print them in hex.",
    )
    parser.add_argument("integers", nargs="*", type=int,
                        help="integers to send (a sample array if omitted)")
    parser.add_argument("--packets", type=int, default=4,
                        help="maximum number of packets")
    parser.add_argument("--max-payload", type=int, default=12,
                        help="maximum payload size in bytes")
    parser.add_argument("--src-addr", type=int, default=93737)
    parser.add_argument("--dest-addr", type=int, default=10973)
    parser.add_argument("--src-port", type=int, default=11)
    parser.add_argument("--dest-port", type=int, default=6)
    parser.add_argument("--hop-count", type=int, default=25)
    parser.add_argument("--compression", type=int, default=3)
    parser.add_argument("--traffic-class", type=int, default=14)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Packetize the given integers and print one hex line per packet."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    integers: List[int] = args.integers or list(_DEFAULT_ARRAY)
    try:
        packets = packetize_array(
            integers,
            args.packets,
            args.max_payload,
            args.src_addr,
            args.dest_addr,
            args.src_port,
            args.dest_port,
            args.hop_count,
            args.compression,
            args.traffic_class,
        )
    except ValueError as exc:
        parser.error(str(exc))
    for packet in packets:
        print(packet.hex())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())