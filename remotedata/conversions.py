from __future__ import annotations

from collections.abc import Iterable
import functools
from typing import Any, assert_never

from .option import Nothing, Option, Some
from .remote_data import Failure, Loading, NotAsked, RemoteData, Success, map2
from .result import Err, Ok, Result


def to_option[T](data: RemoteData[T, Any]) -> Option[T]:
    match data:
        case Success(value):
            return Some(value)
        case NotAsked() | Loading() | Failure():
            return Nothing()
        case _:
            assert_never(data)


def from_option[T, E](opt: Option[T], error: E) -> RemoteData[T, E]:
    """Lift an option. An absent value becomes `Failure(error)`; the result is
    never `NotAsked` or `Loading`."""
    match opt:
        case Some(value):
            return Success(value)
        case Nothing():
            return Failure(error)
        case _:
            assert_never(opt)


def to_optional[T](data: RemoteData[T, Any]) -> T | None:
    return data.value if isinstance(data, Success) else None


def from_optional[T, E](value: T | None, error: E) -> RemoteData[T, E]:
    return Failure(error) if value is None else Success(value)


def to_result[T, E](data: RemoteData[T, E], error: E) -> Result[T, E]:
    """Collapse into a `Result`. `NotAsked` and `Loading` carry no error of
    their own, so they become `Err(error)`."""
    match data:
        case Success(value):
            return Ok(value)
        case Failure(e):
            return Err(e)
        case NotAsked() | Loading():
            return Err(error)
        case _:
            assert_never(data)


def from_result[T, E](result: Result[T, E]) -> RemoteData[T, E]:
    match result:
        case Ok(value):
            return Success(value)
        case Err(error):
            return Failure(error)
        case _:
            assert_never(result)


def from_list[T, E](items: Iterable[RemoteData[T, E]]) -> RemoteData[list[T], E]:
    """Turn a sequence of remote values into a remote list of values.

    This is a left fold with `map2`, starting from `Success([])`. The first
    `Failure` wins; otherwise any `NotAsked` beats any `Loading`, wherever
    they appear in the sequence.
    """
    def append(xs: list[T], x: T) -> list[T]:
        # the accumulator is private to this fold
        xs.append(x)
        return xs

    seed: RemoteData[list[T], E] = Success([])
    return functools.reduce(lambda acc, item: map2(acc, item, append), items, seed)
