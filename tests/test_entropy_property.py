"""Property-based tests for the entropy calculator."""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from byteentropy.entropy import byte_histogram, shannon_entropy


@given(st.binary(min_size=0, max_size=2048))
@settings(max_examples=100)
def test_entropy_bounds(data: bytes) -> None:
    assert 0.0 <= shannon_entropy(data) <= 8.0


@given(st.binary(min_size=0, max_size=2048))
@settings(max_examples=50)
def test_histogram_sums_to_length(data: bytes) -> None:
    histogram = byte_histogram(data)
    assert len(histogram) == 256
    assert sum(histogram) == len(data)


@given(st.binary(min_size=0, max_size=1024), st.randoms(use_true_random=False))
@settings(max_examples=50)
def test_permutation_invariance(data: bytes, rnd) -> None:
    shuffled = bytearray(data)
    rnd.shuffle(shuffled)
    # Counts are identical, and buckets are always summed in byte-value order.
    assert shannon_entropy(bytes(shuffled)) == shannon_entropy(data)


@given(st.integers(min_value=0, max_value=255), st.integers(min_value=1, max_value=4096))
@settings(max_examples=50)
def test_constant_input_is_zero(value: int, size: int) -> None:
    assert shannon_entropy(bytes([value]) * size) == 0.0
