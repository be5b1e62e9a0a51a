from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, assert_never

from .construct import construct
from .errors import InputError
from .remote_data import Failure, Loading, NotAsked, RemoteData, State, Success, state


def _plain(x: Any) -> Any:
    if is_dataclass(x) and not isinstance(x, type):
        return _plain(asdict(x))
    if isinstance(x, Path):
        return str(x)
    if isinstance(x, Enum):
        return x.name.lower()
    if isinstance(x, (list, tuple)):
        return [_plain(y) for y in x]
    if isinstance(x, dict):
        return {k: _plain(v) for k, v in x.items()}
    return x


def encode(data: RemoteData[Any, Any]) -> dict[str, Any]:
    """Encode to a JSON compatible dictionary, tagged by a `state` key."""
    tag = state(data).name.lower()
    match data:
        case NotAsked() | Loading():
            return {"state": tag}
        case Failure(error):
            return {"state": tag, "error": _plain(error)}
        case Success(value):
            return {"state": tag, "value": _plain(value)}
        case _:
            assert_never(data)


def decode(json: Any, value_type: Any = Any, error_type: Any = Any) -> RemoteData[Any, Any]:
    """Inverse of `encode`. Payloads are built with `construct`, so
    `value_type` and `error_type` may be dataclasses, lists, etc. Keys other
    than `state`, `value` and `error` are ignored."""
    if not isinstance(json, dict) or "state" not in json:
        raise InputError("a dictionary with a `state` key", json)

    match construct(State, json["state"]):
        case State.NOT_ASKED:
            return NotAsked()
        case State.LOADING:
            return Loading()
        case State.FAILURE:
            if "error" not in json:
                raise InputError("an `error` for state `failure`", json)
            return Failure(construct(error_type, json["error"]))
        case State.SUCCESS:
            if "value" not in json:
                raise InputError("a `value` for state `success`", json)
            return Success(construct(value_type, json["value"]))
        case s:
            assert_never(s)
