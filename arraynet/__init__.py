"""Encode, decode, checksum and reassemble ArrayNet packets carrying integer arrays."""

__version__ = "0.1.0"
__all__ = ["packet", "packetize", "cli"]