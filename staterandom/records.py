"""Records composed from independent streams, built both ways.

The mutable builders take one stream-tagged handle per stream. The pure
builders run on named composite states (``IdTf``, ``IdBytes``, ``Streams3``)
and reach each stream by field name, so a composite missing a stream the
builder needs is rejected instead of lending it another stream's seed.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .prng import Rng, to_int64
from .slots import IdBytes, IdTf, Streams3, lift_fields, lift_slot
from .state import State
from .streams import ByteRng, IdRng, TfRng, streams
from .transitions import next_bool, next_byte, next_long, next_string

logger = logging.getLogger(__name__)

FOO_TFS_LENGTH = 10


@dataclass(frozen=True)
class Foo:
    id: int
    tfs: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Bar:
    id: int
    b: int
    z: bool

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Baz:
    id: int
    foo: Foo
    bar: Bar

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Stateful builders


def sum3_mut(r: Rng) -> int:
    return to_int64(r.next_long() + r.next_long() + r.next_long())


@streams(r_id=IdRng, r_tf=TfRng)
def mk_foo_mut(r_id: IdRng, r_tf: TfRng) -> Foo:
    return Foo(r_id.next_long(), r_tf.next_string(FOO_TFS_LENGTH))


@streams(r_id=IdRng, r_b=ByteRng)
def mk_bar_mut(r_id: IdRng, r_b: ByteRng) -> Bar:
    return Bar(r_id.next_long(), r_b.next_byte(), r_b.next_bool())


@streams(r_id=IdRng, r_tf=TfRng, r_b=ByteRng)
def mk_baz_mut(r_id: IdRng, r_tf: TfRng, r_b: ByteRng) -> Baz:
    baz = Baz(r_id.next_long(), mk_foo_mut(r_id, r_tf), mk_bar_mut(r_id, r_b))
    logger.debug("mk_baz_mut built id=%d", baz.id)
    return baz


# Pure builders


@State.do
def _sum3():
    a = yield next_long
    b = yield next_long
    c = yield next_long
    return to_int64(a + b + c)


sum3_fp: "State[int, int]" = _sum3()


@State.do
def _mk_foo():
    id_ = yield lift_slot(next_long, "ids")
    tfs = yield lift_slot(next_string(FOO_TFS_LENGTH), "tfs")
    return Foo(id_, tfs)


mk_foo_fp: "State[IdTf, Foo]" = _mk_foo()


@State.do
def _mk_bar():
    id_ = yield lift_slot(next_long, "ids")
    b = yield lift_slot(next_byte, "bytes_")
    z = yield lift_slot(next_bool, "bytes_")
    return Bar(id_, b, z)


mk_bar_fp: "State[IdBytes, Bar]" = _mk_bar()


@State.do
def _mk_baz():
    id_ = yield lift_slot(next_long, "ids")
    foo = yield lift_fields(mk_foo_fp, IdTf)
    bar = yield lift_fields(mk_bar_fp, IdBytes)
    return Baz(id_, foo, bar)


mk_baz_fp: "State[Streams3, Baz]" = _mk_baz()
