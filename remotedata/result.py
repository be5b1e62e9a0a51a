from dataclasses import dataclass


@dataclass(frozen=True)
class Err[E]:
    error: E

    def __bool__(self):
        return False


@dataclass(frozen=True)
class Ok[R]:
    value: R

    def __bool__(self):
        return True


type Result[R, E] = Err[E] | Ok[R]
