"""ArrayNet packet headers, payload decoding, checksums and array reassembly."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from typing import Iterable, List, Sequence, Tuple

HEADER_SIZE = 16
INT_SIZE = 4
CHECKSUM_DIVISOR = (1 << 23) - 1
MAX_PAYLOAD_BYTES = (1 << 14) - HEADER_SIZE

# Field name -> (bit width, bit position of its least significant bit)
# inside the 128-bit big-endian header.
_LAYOUT = {
    "src_addr": (28, 100),
    "dest_addr": (28, 72),
    "src_port": (4, 68),
    "dest_port": (4, 64),
    "fragment_offset": (14, 50),
    "packet_length": (14, 36),
    "maximum_hop_count": (5, 31),
    "checksum": (23, 8),
    "compression_scheme": (2, 6),
    "traffic_class": (6, 0),
}


@dataclass(frozen=True)
class PacketHeader:
    """The sixteen-byte header of an ArrayNet packet."""

    src_addr: int
    dest_addr: int
    src_port: int
    dest_port: int
    fragment_offset: int
    packet_length: int
    maximum_hop_count: int
    checksum: int
    compression_scheme: int
    traffic_class: int

    @property
    def payload_count(self) -> int:
        """Number of 32-bit integers the header says the payload holds."""
        return max((self.packet_length - HEADER_SIZE) // INT_SIZE, 0)

    def field_sum(self) -> int:
        """Sum of every header field except the checksum."""
        return sum(
            getattr(self, f.name) for f in fields(self) if f.name != "checksum"
        )

    def to_bytes(self) -> bytes:
        """Pack the header into its sixteen-byte wire form."""
        value = 0
        for name, (width, shift) in _LAYOUT.items():
            value |= (getattr(self, name) & ((1 << width) - 1)) << shift
        return value.to_bytes(HEADER_SIZE, "big")


def parse_header(packet: bytes) -> PacketHeader:
    """Decode the header fields from the first sixteen bytes of a packet."""
    if len(packet) < HEADER_SIZE:
        raise ValueError(
            f"packet has {len(packet)} bytes, a header needs {HEADER_SIZE}"
        )
    value = int.from_bytes(bytes(packet[:HEADER_SIZE]), "big")
    return PacketHeader(
        **{
            name: (value >> shift) & ((1 << width) - 1)
            for name, (width, shift) in _LAYOUT.items()
        }
    )


def _read_ints(packet: bytes, count: int) -> List[int]:
    end = HEADER_SIZE + count * INT_SIZE
    if len(packet) < end:
        raise ValueError(
            f"packet declares {end} bytes but only {len(packet)} are present"
        )
    return list(struct.unpack(f">{count}i", bytes(packet[HEADER_SIZE:end])))


def decode_payload(packet: bytes) -> List[int]:
    """Return the signed 32-bit integers carried in the packet's payload."""
    return _read_ints(packet, parse_header(packet).payload_count)


def format_packet(packet: bytes) -> str:
    """Render the packet's fields and payload as the printable report."""
    header = parse_header(packet)
    lines = [
        f"Source Address: {header.src_addr}",
        f"Destination Address: {header.dest_addr}",
        f"Source Port: {header.src_port}",
        f"Destination Port: {header.dest_port}",
        f"Fragment Offset: {header.fragment_offset}",
        f"Packet Length: {header.packet_length}",
        f"Maximum Hop Count: {header.maximum_hop_count}",
        f"Checksum: {header.checksum}",
        f"Compression Scheme: {header.compression_scheme}",
        f"Traffic Class: {header.traffic_class}",
    ]
    count = min(header.payload_count, MAX_PAYLOAD_BYTES // INT_SIZE)
    report = "\n".join(lines) + "\nPayload: "
    if count:
        report += " ".join(str(v) for v in _read_ints(packet, count)) + "\n"
    return report


def print_packet(packet: bytes) -> None:
    """Write the packet report to standard output."""
    print(format_packet(packet), end="")


def compute_checksum(packet: bytes) -> int:
    """Checksum over the header fields and the absolute payload values."""
    header = parse_header(packet)
    total = header.field_sum() + sum(abs(v) for v in decode_payload(packet))
    return total % CHECKSUM_DIVISOR


def reconstruct_array(
    packets: Iterable[bytes], array: Sequence[int]
) -> Tuple[List[int], int]:
    """Reassemble payloads of intact packets into a copy of ``array``.

    Packets whose stored checksum does not match the computed one are
    skipped. Integers that would land past the end of the array are
    dropped. Returns the updated list and the number of integers written.
    """
    result = list(array)
    written = 0
    for packet in packets:
        header = parse_header(packet)
        if header.checksum != compute_checksum(packet):
            continue
        start = header.fragment_offset // INT_SIZE
        room = max(len(result) - start, 0)
        chunk = decode_payload(packet)[:room]
        result[start:start + len(chunk)] = chunk
        written += len(chunk)
    return result, written