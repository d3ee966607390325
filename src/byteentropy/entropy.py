from __future__ import annotations

import math


def byte_histogram(data: bytes | bytearray | memoryview) -> list[int]:
    counts = [0] * 256
    view = memoryview(data)
    # Strided views cannot be cast in place.
    octets = view.cast("B") if view.c_contiguous else view.tobytes()
    for b in octets:
        counts[b] += 1
    return counts


def shannon_entropy(data: bytes | bytearray | memoryview) -> float:
    """Shannon entropy of ``data`` in bits per byte, in ``[0.0, 8.0]``.

    Empty buckets are skipped, so empty input sums nothing and yields 0.0.
    The result is never ``-0.0``.
    """
    counts = byte_histogram(data)
    length = float(sum(counts))
    entropy = 0.0
    for c in counts:
        if c == 0:
            continue
        p = c / length
        entropy += p * math.log2(p)
    return 0.0 - entropy
