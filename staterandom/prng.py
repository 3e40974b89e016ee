# Knuth MMIX linear congruential generator with a mutable handle.
# The handle returns the seed it held before advancing, then advances.
from dataclasses import dataclass

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MASK64 = (1 << 64) - 1


def to_uint64(value: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return value & MASK64


def to_int64(value: int) -> int:
    """Two's complement view of the low 64 bits of ``value``."""
    value &= MASK64
    return value - (1 << 64) if value >= 1 << 63 else value


def to_int8(value: int) -> int:
    """Signed view of the low 8 bits, like a byte cast."""
    value &= 0xFF
    return value - 0x100 if value >= 0x80 else value


def advance(seed: int) -> int:
    """One step of ``seed * A + C`` under 64-bit wraparound."""
    return to_int64(seed * MULTIPLIER + INCREMENT)


def top_byte(value: int) -> int:
    """Bits 56-63 of a 64-bit value as a signed byte."""
    # logical shift, so the sign bit lands in the byte rather than smearing
    return to_int8(to_uint64(value) >> 56)


def mix64(value: int) -> int:
    """SplitMix64 finaliser, decorrelates a forked seed from its parent stream."""
    x = to_uint64(value + 0x9E3779B97F4A7C15)
    x = to_uint64((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9)
    x = to_uint64((x ^ (x >> 27)) * 0x94D049BB133111EB)
    return to_int64(x ^ (x >> 31))


def tf(flag: bool) -> str:
    """The 't'/'f' character for a flag."""
    return "t" if flag else "f"


def check_length(length: int) -> int:
    """Validate a string length shared by ``Rng.next_string`` and its pure twin.

    Non-positive lengths mean an empty string; anything but an int is refused.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, received {type(length).__name__}")
    return max(0, length)


@dataclass
class Rng:
    seed: int

    def __post_init__(self) -> None:
        self.seed = to_int64(self.seed)

    def next_long(self) -> int:
        ans = self.seed
        self.seed = advance(ans)
        return ans

    def next_bool(self) -> bool:
        return self.next_long() < 0

    def next_tf(self) -> str:
        return tf(self.next_bool())

    def next_string(self, length: int) -> str:
        return "".join(self.next_tf() for _ in range(check_length(length)))

    def next_byte(self) -> int:
        return top_byte(self.next_long())

    def fork(self) -> "Rng":
        """Split off a private handle of the same stream type."""
        return type(self)(mix64(self.next_long()))
