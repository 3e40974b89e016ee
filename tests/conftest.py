"""Ensure the staterandom package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from staterandom.prng import MASK64, to_int64  # noqa: E402

A = 6364136223846793005
C = 1442695040888963407

SEEDS = (0, 1, 17, 22, 37, -1, 0xDEADBEEF, (1 << 63) - 1, -(1 << 63), 0x123456789ABCDEF0)


def reference_outputs(seed: int, count: int) -> list:
    """Outputs of s' = s*A + C (mod 2^64), output-before-advance, as signed int64."""
    outputs = []
    s = seed & MASK64
    for _ in range(count):
        outputs.append(to_int64(s))
        s = (s * A + C) % (1 << 64)
    return outputs


@pytest.fixture(params=SEEDS, ids=hex)
def seed(request):
    return request.param
