from __future__ import annotations
from typing import Optional, Type, TypeGuard, TypeVar, Any, Union, cast
from enum import Enum
from pathlib import Path
import typing
import types
from dataclasses import is_dataclass, fields, MISSING
import tomllib
import json

from .errors import HelpfulUserError, InputError
from .logging import logger


T = TypeVar("T")

log = logger()


def isgeneric(annot):
    return typing.get_origin(annot) and hasattr(annot, "__args__")


def construct(annot: Any, json: Any) -> Any:
    """Construct an object of type `annot` from decoded JSON or TOML data.
    Raises `InputError` when the data doesn't fit the type."""
    try:
        return _construct(annot, json)
    except (AssertionError, ValueError) as e:
        log.debug(f"could not construct {annot} from {json!r}: {e}")
        raise InputError(annot, json) from e


def is_object_type(dtype: Type[Any]) -> TypeGuard[Type[dict[str, Any]]]:
    return (
        isgeneric(dtype)
        and typing.get_origin(dtype) is dict
        and typing.get_args(dtype)[0] is str
    )


def is_optional_type(dtype: Type[Any]) -> TypeGuard[Type[Optional[Any]]]:
    return (
        isgeneric(dtype)
        and typing.get_origin(dtype) in (Union, types.UnionType)
        and types.NoneType in typing.get_args(dtype)
    )


def _construct(annot: Type[T], json: Any) -> T:
    """The `annot` type should be one of: str, int, float, bool, Path, an
    Enum, list[T], dict[str, T], Optional[T], a union of those, Any or a
    dataclass. Enums are given by case-insensitive member name.
    """
    if annot is Any:
        return cast(T, json)
    if annot is bool:
        assert isinstance(json, bool)
        return cast(T, json)
    if annot is int:
        assert isinstance(json, int) and not isinstance(json, bool)
        return cast(T, json)
    if annot is float:
        assert isinstance(json, (int, float)) and not isinstance(json, bool)
        return cast(T, float(json))
    if annot is str:
        assert isinstance(json, str)
        return cast(T, json)
    if annot is Path and isinstance(json, str):
        return cast(T, Path(json))
    if is_object_type(annot):
        assert isinstance(json, dict)
        return cast(
            T, {k: construct(typing.get_args(annot)[1], v) for k, v in json.items()}
        )
    if isgeneric(annot) and typing.get_origin(annot) is list:
        assert isinstance(json, list)
        return cast(T, [construct(typing.get_args(annot)[0], item) for item in json])
    if is_optional_type(annot) and json is None:
        return cast(T, None)
    if isgeneric(annot) and typing.get_origin(annot) in (Union, types.UnionType):
        for dtype in typing.get_args(annot):
            if dtype is types.NoneType:
                continue
            try:
                return cast(T, _construct(dtype, json))
            except (AssertionError, ValueError, InputError):
                continue
        raise ValueError("None of the choices in type union match data.")
    if isinstance(annot, type) and issubclass(annot, Enum):
        assert isinstance(json, str)
        options = {opt.name.lower(): opt for opt in annot}
        assert json.lower() in options, f"{json} is not one of {list(options)}"
        return cast(T, options[json.lower()])
    if is_dataclass(annot):
        assert isinstance(json, dict)
        arg_annot = typing.get_type_hints(annot)
        unknown = set(json) - set(arg_annot)
        if unknown:
            raise ValueError(f"Unknown fields for {annot.__name__}: {sorted(unknown)}")
        missing = [f.name for f in fields(annot)
                   if f.name not in json and f.default is MISSING and f.default_factory is MISSING]
        if missing:
            raise ValueError(f"Missing fields for {annot.__name__}: {missing}")
        args = {k: construct(arg_annot[k], json[k]) for k in json}
        return cast(T, annot(**args))
    raise ValueError(f"Couldn't construct {annot} from {repr(json)}")


def read_from_file(data_type: Type[T], path: Path, section: Optional[str] = None) -> T:
    """Read an object of `data_type` from given `path` in given `section`. The
    path should refer to a TOML or JSON file. The `section` string may contain
    periods to indicate deeper nesting.

    Example:

    ```python
    read_from_file(Report, Path("./pyproject.toml"), "tool.remotedata")
    ```
    """
    if not path.exists():
        raise HelpfulUserError(f"File not found: {path}")
    with open(path, "rb") as f:
        if path.suffix == ".toml":
            data: Any = tomllib.load(f)
        elif path.suffix == ".json":
            data = json.load(f)
        else:
            raise HelpfulUserError(f"Unrecognized file format: {path}")

    try:
        if section is not None:
            for s in section.split("."):
                data = data[s]
    except KeyError as e:
        raise HelpfulUserError(
            f"Data file `{path}` should contain section `{section}`."
        ) from e

    return construct(data_type, data)
