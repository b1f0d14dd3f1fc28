"""Splitting an integer array into ArrayNet packets."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from arraynet.packet import HEADER_SIZE, INT_SIZE, PacketHeader, compute_checksum

_WORD_MASK = 0xFFFFFFFF


def _encode_ints(values: Iterable[int]) -> bytes:
    """Big-endian two's-complement encoding of 32-bit integers."""
    return b"".join((v & _WORD_MASK).to_bytes(INT_SIZE, "big") for v in values)


def packetize_array(
    array: Iterable[int],
    packets_len: int,
    max_payload: int,
    src_addr: int,
    dest_addr: int,
    src_port: int,
    dest_port: int,
    maximum_hop_count: int,
    compression_scheme: int,
    traffic_class: int,
) -> List[bytes]:
    """Split ``array`` into at most ``packets_len`` checksummed packets.

    Each payload carries at most ``max_payload // 4`` integers; the last
    packet may carry fewer. Integers that do not fit in the allowed number
    of packets are left out.
    """
    per_packet = max_payload // INT_SIZE
    if per_packet <= 0:
        raise ValueError(
            f"max_payload of {max_payload} bytes cannot hold a single integer"
        )
    if packets_len < 0:
        raise ValueError("packets_len must not be negative")

    values = list(array)
    packets: List[bytes] = []
    for start in range(0, len(values), per_packet):
        if len(packets) >= packets_len:
            break
        chunk = values[start:start + per_packet]
        payload = _encode_ints(chunk)
        header = PacketHeader(
            src_addr=src_addr,
            dest_addr=dest_addr,
            src_port=src_port,
            dest_port=dest_port,
            fragment_offset=start * INT_SIZE,
            packet_length=HEADER_SIZE + len(payload),
            maximum_hop_count=maximum_hop_count,
            checksum=0,
            compression_scheme=compression_scheme,
            traffic_class=traffic_class,
        )
        checksum = compute_checksum(header.to_bytes() + payload)
        packets.append(replace(header, checksum=checksum).to_bytes() + payload)
    return packets