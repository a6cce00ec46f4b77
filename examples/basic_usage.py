#!/usr/bin/env python3
"""Basic usage example for b65536.

This example demonstrates:
1. Encoding bytes to Base65536 text
2. Decoding back to bytes
3. Comparing sizes with base64
4. Buffer-bounded decoding and error handling
"""

from __future__ import annotations

import base64

from b65536 import (
    B65536Error,
    ErrorKind,
    decode,
    decode_into,
    decoded_length,
    encode,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("b65536 Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"hello world"

    print("1. Encoding a payload...")
    text = encode(payload)
    print(f"   Input:   {payload!r}")
    print(f"   Encoded: {text}")
    print()

    print("2. Decoding it back...")
    decoded = decode(text)
    print(f"   Decoded: {decoded!r}")
    print(f"   Round trip OK: {decoded == payload}")
    print()

    print("3. Size comparison...")
    b64 = base64.b64encode(payload)
    print(f"   Base65536: {len(text)} characters, {encoded_size(payload)} UTF-8 bytes")
    print(f"   Base64:    {len(b64)} characters, {len(b64)} bytes")
    print()

    print("4. Decoding into a caller-supplied buffer...")
    buffer = bytearray(decoded_length(text))
    written = decode_into(text, buffer)
    print(f"   Wrote {written} bytes: {bytes(buffer)!r}")
    print()

    print("5. Handling errors...")
    for bad_call in (lambda: decode("ABC"), lambda: decode_into(text, bytearray(4))):
        try:
            bad_call()
        except B65536Error as e:
            label = "invalid input" if e.kind is ErrorKind.INVALID_ENCODING else "buffer too small"
            print(f"   {label}: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
