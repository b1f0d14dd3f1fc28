# arraynet

Tools for ArrayNet, a small network protocol that carries arrays of signed
32-bit integers. Each packet starts with a 16-byte header. The header holds
the source and destination addresses and ports, a fragment offset, the packet
length, a maximum hop count, a checksum, a compression scheme and a traffic
class. A big-endian payload of integers follows the header.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from arraynet.packet import (
    PacketHeader,
    parse_header,
    decode_payload,
    format_packet,
    print_packet,
    compute_checksum,
    reconstruct_array,
)
from arraynet.packetize import packetize_array

# Split an array into packets. Each payload holds at most 16 bytes,
# and no more than 3 packets are produced.
packets = packetize_array(
    [10, 11, 12, 13, 14, 15, 16, 17, 18, 19, 20, 21],
    3,        # packets_len: the most packets to produce
    16,       # max_payload in bytes
    123123,   # src_addr
    34534534, # dest_addr
    12,       # src_port
    13,       # dest_port
    14,       # maximum_hop_count
    0,        # compression_scheme
    15,       # traffic_class
)

header = parse_header(packets[0])          # a PacketHeader
print(header.fragment_offset, header.packet_length, header.checksum)
print(decode_payload(packets[0]))          # [10, 11, 12, 13]
assert header.to_bytes() == packets[0][:16]

print_packet(packets[0])                   # field-by-field listing
text = format_packet(packets[0])           # the same listing as a string

assert compute_checksum(packets[0]) == header.checksum

# Put the array back together. Packets whose checksum does not match
# are skipped.
array, written = reconstruct_array(packets, [0] * 12)
print(written, array)
```

`packetize_array` raises `ValueError` when `max_payload` is too small to
hold one integer or when `packets_len` is negative. Integers that do not fit
in `packets_len` packets are left out. `parse_header` and `decode_payload`
raise `ValueError` for packets shorter than their header or declared length.

### The checksum

The checksum is the sum of every header field except the checksum itself,
plus the absolute values of the payload integers. That sum is taken
modulo 2**23 - 1. A corrupted payload can still pass this check.

### Reassembly

`reconstruct_array(packets, array)` does not modify `array`. It returns a
pair: a new list with the payloads written in, and the number of integers
written. It uses each packet's fragment offset to find where that packet's
integers belong. Integers that would land past the end of the list are
dropped.

## Command line

```
arraynet
arraynet 1 2 3 4 5 --packets 2 --max-payload 8
```

The command splits the integers given on the command line into packets and
prints each packet as one line of hex. With no integers it uses a built-in
sample array. Options set the header values: `--packets`, `--max-payload`,
`--src-addr`, `--dest-addr`, `--src-port`, `--dest-port`, `--hop-count`,
`--compression` and `--traffic-class`.

## What it does not do

The package builds and reads packets in memory only. It does not open
sockets, send or receive packets, or route them.