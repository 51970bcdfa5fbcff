"""UUID utilities for neo-organizations."""

import time
import uuid


def generate_uuid_v7() -> uuid.UUID:
    """
    Generate a UUIDv7 with time-based ordering.

    The first 48 bits hold the Unix timestamp in milliseconds, so ids sort by
    creation time.
    """
    timestamp_ms = int(time.time() * 1000)
    uuid_bytes = bytearray(timestamp_ms.to_bytes(6, byteorder='big') + uuid.uuid4().bytes[6:])

    # Version 7 in the high nibble of byte 6, RFC 4122 variant in byte 8
    uuid_bytes[6] = (uuid_bytes[6] & 0x0f) | 0x70
    uuid_bytes[8] = (uuid_bytes[8] & 0x3f) | 0x80

    return uuid.UUID(bytes=bytes(uuid_bytes))
