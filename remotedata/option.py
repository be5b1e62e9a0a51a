from dataclasses import dataclass


@dataclass(frozen=True)
class Nothing:
    def __bool__(self):
        return False


@dataclass(frozen=True)
class Some[T]:
    """A present value. `Some(None)` is present, unlike a plain `None`."""
    value: T

    def __bool__(self):
        return True


type Option[T] = Nothing | Some[T]
