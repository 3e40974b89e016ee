"""Pure counterparts of the ``Rng`` handle methods, over a single int64 seed."""

from .prng import advance, check_length, tf, to_int64, top_byte
from .state import State, Step


def _next_long(seed: int) -> Step[int, int]:
    seed = to_int64(seed)
    return Step(state=advance(seed), value=seed)


next_long: "State[int, int]" = State(_next_long)

next_bool: "State[int, bool]" = next_long.map(lambda value: value < 0)

next_tf: "State[int, str]" = next_bool.map(tf)

next_byte: "State[int, int]" = next_long.map(top_byte)


def next_string(length: int) -> "State[int, str]":
    return next_tf.replicate(check_length(length)).map("".join)
