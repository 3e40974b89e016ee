"""Pure state-threading transitions.

A ``State`` wraps a function ``state -> Step(state, value)``. Transitions are
combined with ``flat_map``/``then``/``replicate`` or with generator-based
``State.do`` blocks; none of them hand the threaded state to caller code, so a
state that has already been consumed cannot be fed to a second transition by
mistake.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from inspect import isgeneratorfunction
from typing import Any, Callable, Generator, Generic, Iterable, Tuple, TypeVar

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Step(Generic[S, A]):
    """Result of one transition: the state to thread forward and the output."""

    state: S
    value: A


class State(Generic[S, A]):
    __slots__ = ("_advance",)

    def __init__(self, advance: Callable[[S], Step[S, A]]):
        if not callable(advance):
            raise TypeError("State expects a callable state -> Step")
        self._advance = advance

    def __repr__(self) -> str:
        name = getattr(self._advance, "__qualname__", repr(self._advance))
        return f"State({name})"

    # running

    def run(self, state: S) -> Step[S, A]:
        step = self._advance(state)
        if not isinstance(step, Step):
            raise TypeError(
                f"transition returned {type(step).__name__}, expected Step"
            )
        return step

    def run_value(self, state: S) -> A:
        return self.run(state).value

    def run_state(self, state: S) -> S:
        return self.run(state).state

    # constructors

    @staticmethod
    def pure(value: A) -> "State[Any, A]":
        return State(lambda s: Step(s, value))

    @staticmethod
    def get() -> "State[S, S]":
        return State(lambda s: Step(s, s))

    @staticmethod
    def set(state: S) -> "State[S, None]":
        return State(lambda _: Step(state, None))

    @staticmethod
    def modify(f: Callable[[S], S]) -> "State[S, None]":
        return State(lambda s: Step(f(s), None))

    @staticmethod
    def inspect(f: Callable[[S], A]) -> "State[S, A]":
        return State(lambda s: Step(s, f(s)))

    # sequencing

    def map(self, f: Callable[[A], B]) -> "State[S, B]":
        def advance(s: S) -> Step[S, B]:
            step = self.run(s)
            return Step(step.state, f(step.value))

        return State(advance)

    def flat_map(self, f: Callable[[A], "State[S, B]"]) -> "State[S, B]":
        def advance(s: S) -> Step[S, B]:
            step = self.run(s)
            return _as_state(f(step.value)).run(step.state)

        return State(advance)

    def then(self, other: "State[S, B]") -> "State[S, B]":
        return self.flat_map(lambda _: other)

    def zip(self, other: "State[S, B]") -> "State[S, Tuple[A, B]]":
        return self.flat_map(lambda a: other.map(lambda b: (a, b)))

    def replicate(self, count: int) -> "State[S, Tuple[A, ...]]":
        """Run this transition ``count`` times, collecting outputs in order."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, received {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be non-negative, received {count}")

        def advance(s: S) -> Step[S, Tuple[A, ...]]:
            values = []
            for _ in range(count):
                step = self.run(s)
                s = step.state
                values.append(step.value)
            return Step(s, tuple(values))

        return State(advance)

    @staticmethod
    def sequence(transitions: Iterable["State[S, A]"]) -> "State[S, Tuple[A, ...]]":
        transitions = tuple(_as_state(t) for t in transitions)

        def advance(s: S) -> Step[S, Tuple[A, ...]]:
            values = []
            for transition in transitions:
                step = transition.run(s)
                s = step.state
                values.append(step.value)
            return Step(s, tuple(values))

        return State(advance)

    @staticmethod
    def traverse(
        items: Iterable[B], f: Callable[[B], "State[S, A]"]
    ) -> "State[S, Tuple[A, ...]]":
        return State.sequence(f(item) for item in items)

    @staticmethod
    def do(
        fn: Callable[..., Generator["State[S, Any]", Any, A]]
    ) -> Callable[..., "State[S, A]"]:
        """Build transitions from a generator function.

        Inside ``fn`` each ``value = yield transition`` runs ``transition`` on
        the current state and binds its output; the generator's return value
        becomes the output of the whole block::

            @State.do
            def sum3():
                a = yield next_long
                b = yield next_long
                c = yield next_long
                return a + b + c

            sum3().run_value(17)
        """

        if not isgeneratorfunction(fn):
            name = getattr(fn, "__qualname__", repr(fn))
            raise TypeError(f"State.do expects a generator function, {name} never yields")

        @functools.wraps(fn)
        def build(*args, **kwargs) -> State[S, A]:
            def advance(s: S) -> Step[S, A]:
                gen = fn(*args, **kwargs)
                value = None
                while True:
                    # only the generator's own return ends the block; a
                    # StopIteration from a transition propagates
                    try:
                        yielded = gen.send(value)
                    except StopIteration as stop:
                        return Step(s, stop.value)
                    step = _as_state(yielded).run(s)
                    s, value = step.state, step.value

            return State(advance)

        return build


def _as_state(candidate: Any) -> State:
    if not isinstance(candidate, State):
        raise TypeError(
            f"expected a State transition, received {type(candidate).__name__}"
        )
    return candidate
