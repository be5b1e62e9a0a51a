from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeGuard, assert_never


@dataclass(frozen=True)
class NotAsked:
    """No request was made yet."""
    def __bool__(self):
        return False


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""
    def __bool__(self):
        return False


@dataclass(frozen=True)
class Failure[E]:
    """The request completed with an error."""
    error: E

    def __bool__(self):
        return False


@dataclass(frozen=True)
class Success[T]:
    """The request completed with a value."""
    value: T

    def __bool__(self):
        return True


type RemoteData[T, E] = NotAsked | Loading | Failure[E] | Success[T]


class State(Enum):
    NOT_ASKED = 1
    LOADING = 2
    FAILURE = 3
    SUCCESS = 4


def not_asked() -> NotAsked:
    return NotAsked()


def loading() -> Loading:
    return Loading()


def fail[E](error: E) -> Failure[E]:
    return Failure(error)


def succeed[T](value: T) -> Success[T]:
    return Success(value)


def state(data: RemoteData[Any, Any]) -> State:
    match data:
        case NotAsked():
            return State.NOT_ASKED
        case Loading():
            return State.LOADING
        case Failure():
            return State.FAILURE
        case Success():
            return State.SUCCESS
        case _:
            assert_never(data)


def is_not_asked(data: RemoteData[Any, Any]) -> TypeGuard[NotAsked]:
    return isinstance(data, NotAsked)


def is_loading(data: RemoteData[Any, Any]) -> TypeGuard[Loading]:
    return isinstance(data, Loading)


def is_failure[E](data: RemoteData[Any, E]) -> TypeGuard[Failure[E]]:
    return isinstance(data, Failure)


def is_success[T](data: RemoteData[T, Any]) -> TypeGuard[Success[T]]:
    return isinstance(data, Success)


def map[T, U, E](data: RemoteData[T, E], f: Callable[[T], U]) -> RemoteData[U, E]:
    """Apply `f` to the value of a `Success`; other variants pass through."""
    match data:
        case Success(value):
            return Success(f(value))
        case NotAsked() | Loading() | Failure():
            return data
        case _:
            assert_never(data)


def map_error[T, E, F](data: RemoteData[T, E], f: Callable[[E], F]) -> RemoteData[T, F]:
    """Apply `f` to the error of a `Failure`; other variants pass through."""
    match data:
        case Failure(error):
            return Failure(f(error))
        case NotAsked() | Loading() | Success():
            return data
        case _:
            assert_never(data)


def map_both[T, U, E, F](
    data: RemoteData[T, E], on_success: Callable[[T], U], on_failure: Callable[[E], F]
) -> RemoteData[U, F]:
    return map_error(map(data, on_success), on_failure)


def map2[A, B, C, E](
    data1: RemoteData[A, E], data2: RemoteData[B, E], f: Callable[[A, B], C]
) -> RemoteData[C, E]:
    """Combine two values. When they are not both `Success`, the result is
    decided by a fixed precedence: `Failure` (the left one if both fail),
    then `NotAsked`, then `Loading`. Position only matters between two
    failures.
    """
    match (data1, data2):
        case (Success(a), Success(b)):
            return Success(f(a, b))
        case (Failure() as failure, _) | (_, Failure() as failure):
            return failure
        case (NotAsked(), _) | (_, NotAsked()):
            return NotAsked()
        case (Loading(), _) | (_, Loading()):
            return Loading()
        case _:
            raise TypeError(f"Not a RemoteData value: {data1!r}, {data2!r}")


def map3[A, B, C, D, E](
    data1: RemoteData[A, E],
    data2: RemoteData[B, E],
    data3: RemoteData[C, E],
    f: Callable[[A, B, C], D],
) -> RemoteData[D, E]:
    """Combine three values with the precedence of `map2`, scanning left to
    right: the first `Failure` wins, then the first `NotAsked`, then `Loading`.
    """
    pair = map2(data1, data2, lambda a, b: (a, b))
    return map2(pair, data3, lambda ab, c: f(ab[0], ab[1], c))


def and_map[T, U, E](
    data: RemoteData[T, E], data_f: RemoteData[Callable[[T], U], E]
) -> RemoteData[U, E]:
    """Apply a wrapped function to a wrapped argument. The argument is the left
    operand of `map2`, so its failure is reported before the function's.
    """
    return map2(data, data_f, lambda x, f: f(x))


def chain[T, U, E](data: RemoteData[T, E], f: Callable[[T], RemoteData[U, E]]) -> RemoteData[U, E]:
    """Sequence a dependent fetch. On `Success(a)` the result is `f(a)` itself,
    without further wrapping.
    """
    match data:
        case Success(value):
            return f(value)
        case NotAsked() | Loading() | Failure():
            return data
        case _:
            assert_never(data)


def unwrap[T](data: RemoteData[T, Any], default: T) -> T:
    match data:
        case Success(value):
            return value
        case NotAsked() | Loading() | Failure():
            return default
        case _:
            assert_never(data)


def unpack[T, U](data: RemoteData[T, Any], default: Callable[[], U], on_success: Callable[[T], U]) -> U:
    # `default` is only evaluated when there is no value
    match data:
        case Success(value):
            return on_success(value)
        case NotAsked() | Loading() | Failure():
            return default()
        case _:
            assert_never(data)


def fold[T, E, R](
    data: RemoteData[T, E],
    on_not_asked: Callable[[], R],
    on_loading: Callable[[], R],
    on_failure: Callable[[E], R],
    on_success: Callable[[T], R],
) -> R:
    match data:
        case NotAsked():
            return on_not_asked()
        case Loading():
            return on_loading()
        case Failure(error):
            return on_failure(error)
        case Success(value):
            return on_success(value)
        case _:
            assert_never(data)
