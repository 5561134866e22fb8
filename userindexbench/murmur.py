"""MurmurHash3 hash functions: x86 32-bit, x86 128-bit and x64 128-bit variants."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_X86_32_C1 = 0xCC9E2D51
_X86_32_C2 = 0x1B873593

_X86_128_C = (0x239B961B, 0xAB0E9789, 0x38B34AE5, 0xA1E38B93)
_X86_128_ROT_K = (15, 16, 17, 18)
_X86_128_ROT_H = (19, 17, 15, 13)
_X86_128_ADD = (0x561CCD1B, 0x0BCAA747, 0x96CD1C35, 0x32AC3B17)

_X64_C1 = 0x87C37B91114253D5
_X64_C2 = 0x4CF5AD432745937F


def _as_bytes(key: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise TypeError(f"key must be str or bytes-like, not {type(key).__name__}")


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _MASK32


def _rotl64(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _mix_k32(k: int, first: int, rotation: int, second: int) -> int:
    k = (k * first) & _MASK32
    k = _rotl32(k, rotation)
    return (k * second) & _MASK32


def _mix_k64(k: int, first: int, rotation: int, second: int) -> int:
    k = (k * first) & _MASK64
    k = _rotl64(k, rotation)
    return (k * second) & _MASK64


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def _fmix64(k: int) -> int:
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK64
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK64
    k ^= k >> 33
    return k


def murmurhash3_x86_32(key, seed=0) -> int:
    """Return the 32-bit MurmurHash3 (x86 variant) of *key*."""
    data = _as_bytes(key)
    length = len(data)
    body = length - length % 4
    h1 = seed & _MASK32

    for (k1,) in struct.iter_unpack("<I", data[:body]):
        h1 ^= _mix_k32(k1, _X86_32_C1, 15, _X86_32_C2)
        h1 = _rotl32(h1, 13)
        h1 = (h1 * 5 + 0xE6546B64) & _MASK32

    tail = data[body:]
    if tail:
        h1 ^= _mix_k32(int.from_bytes(tail, "little"), _X86_32_C1, 15, _X86_32_C2)

    h1 ^= length & _MASK32
    return _fmix32(h1)


def murmurhash3_x86_128(key, seed=0) -> tuple[int, int, int, int]:
    """Return the 128-bit MurmurHash3 (x86 variant) of *key* as four 32-bit words."""
    data = _as_bytes(key)
    length = len(data)
    body = length - length % 16
    h = [seed & _MASK32] * 4

    for block in struct.iter_unpack("<4I", data[:body]):
        for lane, k in enumerate(block):
            nxt = (lane + 1) % 4
            h[lane] ^= _mix_k32(
                k, _X86_128_C[lane], _X86_128_ROT_K[lane], _X86_128_C[nxt]
            )
            h[lane] = _rotl32(h[lane], _X86_128_ROT_H[lane])
            h[lane] = (h[lane] + h[nxt]) & _MASK32
            h[lane] = (h[lane] * 5 + _X86_128_ADD[lane]) & _MASK32

    tail = data[body:]
    for lane in range(4):
        chunk = tail[4 * lane : 4 * lane + 4]
        if chunk:
            nxt = (lane + 1) % 4
            h[lane] ^= _mix_k32(
                int.from_bytes(chunk, "little"),
                _X86_128_C[lane],
                _X86_128_ROT_K[lane],
                _X86_128_C[nxt],
            )

    h = [x ^ (length & _MASK32) for x in h]
    h = _combine32(h)
    h = [_fmix32(x) for x in h]
    h = _combine32(h)
    return h[0], h[1], h[2], h[3]


def _combine32(h: list[int]) -> list[int]:
    h1 = (h[0] + h[1] + h[2] + h[3]) & _MASK32
    return [h1, (h[1] + h1) & _MASK32, (h[2] + h1) & _MASK32, (h[3] + h1) & _MASK32]


def murmurhash3_x64_128(key, seed=0) -> tuple[int, int]:
    """Return the 128-bit MurmurHash3 (x64 variant) of *key* as two 64-bit words."""
    data = _as_bytes(key)
    length = len(data)
    body = length - length % 16
    h1 = h2 = seed & _MASK32

    for k1, k2 in struct.iter_unpack("<2Q", data[:body]):
        h1 ^= _mix_k64(k1, _X64_C1, 31, _X64_C2)
        h1 = _rotl64(h1, 27)
        h1 = (h1 + h2) & _MASK64
        h1 = (h1 * 5 + 0x52DCE729) & _MASK64

        h2 ^= _mix_k64(k2, _X64_C2, 33, _X64_C1)
        h2 = _rotl64(h2, 31)
        h2 = (h2 + h1) & _MASK64
        h2 = (h2 * 5 + 0x38495AB5) & _MASK64

    tail = data[body:]
    if len(tail) > 8:
        h2 ^= _mix_k64(int.from_bytes(tail[8:], "little"), _X64_C2, 33, _X64_C1)
    if tail:
        h1 ^= _mix_k64(int.from_bytes(tail[:8], "little"), _X64_C1, 31, _X64_C2)

    h1 ^= length
    h2 ^= length

    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64

    h1 = _fmix64(h1)
    h2 = _fmix64(h2)

    h1 = (h1 + h2) & _MASK64
    h2 = (h2 + h1) & _MASK64
    return h1, h2