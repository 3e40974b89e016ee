"""Stream-tagged handles.

Each logical stream gets its own ``Rng`` subclass. Builders that consume more
than one stream declare which parameter takes which stream, and a handle of
the wrong type is rejected before any stream is advanced.
"""

import functools
import inspect
import logging
from typing import Any, Callable, Type, TypeVar, Union

from .prng import Rng

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Rng)
F = TypeVar("F", bound=Callable[..., Any])


class StreamMismatchError(TypeError):
    """A handle for one stream was passed where another stream is required."""

    def __init__(self, name: str, expected: Type[Rng], received: Any):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(
            f"'{name}' expects the {stream_name(expected)} stream, "
            f"received {stream_name(received)}"
        )


class IdRng(Rng):
    """Identifier stream."""

    stream = "id"


class TfRng(Rng):
    """'t'/'f' flag stream."""

    stream = "tf"


class ByteRng(Rng):
    """Byte and boolean stream."""

    stream = "byte"


def stream_name(handle: Union[Rng, Type[Rng], Any]) -> str:
    cls = handle if isinstance(handle, type) else type(handle)
    if not (isinstance(cls, type) and issubclass(cls, Rng)):
        return f"a non-stream {cls.__name__}"
    return getattr(cls, "stream", "untagged")


def require_stream(handle: Any, stream_type: Type[R], name: str = "rng") -> R:
    # exact type: a stream-B subclass of stream A is still a different stream
    if type(handle) is not stream_type:
        logger.warning(
            "rejected %s handle for '%s' (wants %s)",
            stream_name(handle),
            name,
            stream_name(stream_type),
        )
        raise StreamMismatchError(name, stream_type, handle)
    return handle


def streams(**expected: Type[Rng]) -> Callable[[F], F]:
    """Check every tagged parameter of the decorated builder before it runs."""

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        unknown = set(expected) - set(signature.parameters)
        if unknown:
            raise TypeError(
                f"{func.__name__}() has no parameter(s) {', '.join(sorted(unknown))}"
            )

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound = signature.bind(*args, **kwargs)
            for name, stream_type in expected.items():
                require_stream(bound.arguments.get(name), stream_type, name)
            return func(*args, **kwargs)

        wrapper.__streams__ = dict(expected)
        return wrapper  # type: ignore[return-value]

    return decorator
