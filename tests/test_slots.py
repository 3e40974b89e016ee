"""Composite state lifting: each slot advances only through its own lift."""

import pytest

from staterandom.prng import Rng, advance
from staterandom.slots import IdBytes, IdTf, Streams3, lift_fields, lift_slot, lift_slots
from staterandom.state import State, Step
from staterandom.transitions import next_long, next_string


def test_slot_zero_leaves_slot_one_untouched(seed):
    other = 0x0123456789ABCDEF
    step = lift_slot(next_long, 0).run((seed, other))
    assert step.value == Rng(seed).next_long()
    assert step.state == (advance(Rng(seed).seed), other)


def test_slot_one_leaves_slot_zero_untouched(seed):
    other = -42
    step = lift_slot(next_long, 1).run((other, seed))
    assert step.state[0] == other
    assert step.state[1] == advance(Rng(seed).seed)


def test_three_slot_independence():
    state = (1, 2, 3)
    for index in range(3):
        step = lift_slot(next_long, index).run(state)
        for other in range(3):
            if other != index:
                assert step.state[other] == state[other]
        assert step.state[index] == advance(state[index])


def test_lift_passes_inner_value_through():
    inner = next_string(6)
    assert lift_slot(inner, 2).run_value((0, 0, 22)) == inner.run_value(22)


def test_named_slots_keep_tuple_type():
    state = IdTf(ids=17, tfs=22)
    step = lift_slot(next_long, "tfs").run(state)
    assert isinstance(step.state, IdTf)
    assert step.state == IdTf(ids=17, tfs=advance(22))
    assert step.value == 22


def test_plain_tuple_stays_plain():
    step = lift_slot(next_long, 0).run((17, 22))
    assert type(step.state) is tuple


def test_negative_index_counts_from_the_end():
    assert lift_slot(next_long, -1).run((1, 2, 3)).state == (1, 2, advance(3))


def test_lift_slots_maps_pair_onto_chosen_slots():
    pair = lift_slot(next_long, 0).zip(lift_slot(next_long, 1))
    step = lift_slots(pair, 0, 2).run(Streams3(ids=17, tfs=22, bytes_=37))
    assert step.value == (17, 37)
    assert step.state == Streams3(ids=advance(17), tfs=22, bytes_=advance(37))


def test_lift_slots_order_follows_arguments():
    pair = lift_slot(next_long, 0).zip(lift_slot(next_long, 1))
    step = lift_slots(pair, 2, 0).run((17, 22, 37))
    assert step.value == (37, 17)
    assert step.state == (advance(17), 22, advance(37))


def test_lift_slots_by_name():
    inner = lift_slot(next_long, 1)
    step = lift_slots(inner, "ids", "bytes_").run(Streams3(1, 2, 3))
    assert step.state == Streams3(1, 2, advance(3))


def test_duplicate_slots_rejected_at_construction():
    with pytest.raises(ValueError):
        lift_slots(next_long, 1, 1)
    with pytest.raises(ValueError):
        lift_slots(next_long)


def test_aliasing_slots_rejected_when_run():
    transition = lift_slots(State.pure(None), 0, -2)
    with pytest.raises(ValueError):
        transition.run((1, 2))


def test_bad_slots():
    with pytest.raises(IndexError):
        lift_slot(next_long, 3).run((1, 2))
    with pytest.raises(IndexError):
        lift_slot(next_long, "nope").run(IdTf(1, 2))
    with pytest.raises(IndexError):
        lift_slot(next_long, "ids").run((1, 2))
    with pytest.raises(TypeError):
        lift_slot(next_long, 0).run([1, 2])
    with pytest.raises(TypeError):
        lift_slot(next_long, 1.0)


def test_lifted_transition_must_keep_state_size():
    shrink = State(lambda s: Step(s[:1], None))
    with pytest.raises(TypeError):
        lift_slots(shrink, 0, 1).run((1, 2, 3))


def test_lift_fields_matches_streams_by_name():
    inner = lift_slot(next_long, "bytes_")
    step = lift_fields(inner, IdBytes).run(Streams3(ids=1, tfs=2, bytes_=3))
    assert step.value == 3
    assert step.state == Streams3(ids=1, tfs=2, bytes_=advance(3))


def test_lift_fields_rejects_a_composite_missing_a_stream():
    with pytest.raises(IndexError, match="bytes_"):
        lift_fields(lift_slot(next_long, "bytes_"), IdBytes).run(IdTf(1, 2))


def test_lift_fields_needs_a_named_shape():
    with pytest.raises(TypeError):
        lift_fields(next_long, tuple)
    with pytest.raises(TypeError):
        lift_fields(next_long, IdTf(1, 2))


def test_lift_fields_inner_must_keep_its_shape():
    plain = State(lambda s: Step(tuple(s), None))
    with pytest.raises(TypeError):
        lift_fields(plain, IdTf).run(Streams3(1, 2, 3))
