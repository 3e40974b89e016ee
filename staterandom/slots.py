"""Lifting single-stream transitions onto composite states.

A composite state is a tuple, or a ``NamedTuple``, of independent seeds. A
lifted transition reads only its own slot(s), writes only its own slot(s)
back, and passes the inner output through unchanged.
"""

from typing import Any, NamedTuple, Sequence, Tuple, Union

from .state import State, Step

Slot = Union[int, str]


class IdTf(NamedTuple):
    ids: int
    tfs: int


class IdBytes(NamedTuple):
    ids: int
    bytes_: int


class Streams3(NamedTuple):
    ids: int
    tfs: int
    bytes_: int


def _is_named(composite: Tuple) -> bool:
    return hasattr(composite, "_fields") and hasattr(composite, "_replace")


def _index(composite: Any, slot: Slot) -> int:
    if not isinstance(composite, tuple):
        raise TypeError(
            f"composite state must be a tuple, received {type(composite).__name__}"
        )
    if isinstance(slot, str):
        if not _is_named(composite):
            raise IndexError(f"slot '{slot}' needs a NamedTuple state")
        try:
            return composite._fields.index(slot)
        except ValueError:
            raise IndexError(
                f"{type(composite).__name__} has no slot '{slot}'"
            ) from None
    size = len(composite)
    if not -size <= slot < size:
        raise IndexError(f"slot {slot} out of range for {size}-slot state")
    return slot % size


def _rebuild(composite: Tuple, updates: dict) -> Tuple:
    items = list(composite)
    for index, value in updates.items():
        items[index] = value
    if _is_named(composite):
        return type(composite)(*items)
    return tuple(items)


def _check_slots(slots: Sequence[Slot]) -> Tuple[Slot, ...]:
    if not slots:
        raise ValueError("at least one slot is required")
    for slot in slots:
        if isinstance(slot, bool) or not isinstance(slot, (int, str)):
            raise TypeError(f"slot must be an int or field name, received {slot!r}")
    if len(set(slots)) != len(slots):
        raise ValueError(f"slots must be distinct, received {tuple(slots)}")
    return tuple(slots)


def lift_slot(transition: State, slot: Slot) -> State:
    """Run ``transition`` on one slot of a composite state."""
    (slot,) = _check_slots((slot,))

    def advance(composite: Tuple) -> Step:
        index = _index(composite, slot)
        inner = transition.run(composite[index])
        return Step(_rebuild(composite, {index: inner.state}), inner.value)

    return State(advance)


def lift_slots(transition: State, *slots: Slot) -> State:
    """Run a transition over a k-slot state on k chosen slots of a larger one.

    The inner transition sees a plain tuple of the chosen sub-states, in the
    order the slots are listed, and must hand back a tuple of the same size.
    """
    slots = _check_slots(slots)

    def advance(composite: Tuple) -> Step:
        indices = [_index(composite, slot) for slot in slots]
        if len(set(indices)) != len(indices):
            raise ValueError(f"slots {slots} name the same position twice")
        inner = transition.run(tuple(composite[i] for i in indices))
        if not isinstance(inner.state, tuple) or len(inner.state) != len(indices):
            raise TypeError(
                f"lifted transition must return a {len(indices)}-tuple state"
            )
        return Step(_rebuild(composite, dict(zip(indices, inner.state))), inner.value)

    return State(advance)


def lift_fields(transition: State, shape: type) -> State:
    """Run a transition over ``shape`` on the same-named fields of a larger state.

    Streams are matched by field name, so a composite that lacks one of
    ``shape``'s streams is rejected rather than read from whatever sits at
    that position.
    """
    fields = getattr(shape, "_fields", None)
    if not isinstance(shape, type) or not fields:
        raise TypeError(f"lift_fields expects a NamedTuple type, received {shape!r}")

    def advance(composite: Tuple) -> Step:
        indices = [_index(composite, field) for field in fields]
        inner = transition.run(shape(*(composite[i] for i in indices)))
        if not isinstance(inner.state, shape):
            raise TypeError(
                f"lifted transition must return a {shape.__name__} state"
            )
        return Step(_rebuild(composite, dict(zip(indices, inner.state))), inner.value)

    return State(advance)
