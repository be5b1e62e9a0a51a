from collections.abc import Awaitable, Callable
from typing import Any

from .logging import logger
from .remote_data import Failure, RemoteData, Success


log = logger()


def attempt[T](
    f: Callable[..., T], *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any
) -> RemoteData[T, BaseException]:
    """Call `f(*args, **kwargs)` and capture the outcome. Exceptions matching
    `catch` become a `Failure`, anything else propagates."""
    try:
        return Success(f(*args, **kwargs))
    except catch as e:
        log.debug(f"`{getattr(f, '__name__', f)}` raised {e!r}")
        return Failure(e)


async def fetch[T](
    awaitable: Awaitable[T],
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception
) -> RemoteData[T, BaseException]:
    """Await a request and capture the outcome as `Success` or `Failure`.

    With the default `catch`, cancellation is not captured since
    `asyncio.CancelledError` is not an `Exception`.
    """
    try:
        return Success(await awaitable)
    except catch as e:
        log.debug(f"fetch of {awaitable!r} raised {e!r}")
        return Failure(e)
