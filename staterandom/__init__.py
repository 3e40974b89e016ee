"""Public package surface for the staterandom stream generator."""

from .demo import DemoConfig, run_demo
from .logger import setup_logger
from .prng import Rng, advance, to_int64
from .records import (
    Bar,
    Baz,
    Foo,
    mk_bar_fp,
    mk_bar_mut,
    mk_baz_fp,
    mk_baz_mut,
    mk_foo_fp,
    mk_foo_mut,
    sum3_fp,
    sum3_mut,
)
from .slots import IdBytes, IdTf, Streams3, lift_fields, lift_slot, lift_slots
from .state import State, Step
from .streams import ByteRng, IdRng, StreamMismatchError, TfRng, require_stream, streams
from .transitions import next_bool, next_byte, next_long, next_string, next_tf

__all__ = [
    "Bar",
    "Baz",
    "ByteRng",
    "DemoConfig",
    "Foo",
    "IdBytes",
    "IdRng",
    "IdTf",
    "Rng",
    "State",
    "Step",
    "StreamMismatchError",
    "Streams3",
    "TfRng",
    "advance",
    "lift_fields",
    "lift_slot",
    "lift_slots",
    "mk_bar_fp",
    "mk_bar_mut",
    "mk_baz_fp",
    "mk_baz_mut",
    "mk_foo_fp",
    "mk_foo_mut",
    "next_bool",
    "next_byte",
    "next_long",
    "next_string",
    "next_tf",
    "require_stream",
    "run_demo",
    "setup_logger",
    "streams",
    "sum3_fp",
    "sum3_mut",
    "to_int64",
]
