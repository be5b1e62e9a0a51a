import asyncio
import json
import logging

import pytest

from remotedata import Failure, Success, attempt, fetch, map


async def get_user(user_id: int):
    await asyncio.sleep(0.01)
    if user_id < 0:
        raise LookupError(f"no user {user_id}")
    return {"id": user_id}


@pytest.mark.asyncio
async def test_fetch():
    assert await fetch(get_user(1)) == Success({"id": 1})

    result = await fetch(get_user(-1))
    assert isinstance(result, Failure)
    assert isinstance(result.error, LookupError)


@pytest.mark.asyncio
async def test_fetch_gather():
    results = await asyncio.gather(*(fetch(get_user(i)) for i in (1, -2, 3)))
    assert [bool(r) for r in results] == [True, False, True]
    assert map(results[2], lambda u: u["id"]) == Success(3)


@pytest.mark.asyncio
async def test_fetch_catch():
    with pytest.raises(LookupError):
        await fetch(get_user(-1), catch=ValueError)


@pytest.mark.asyncio
async def test_fetch_cancelled():
    task = asyncio.create_task(fetch(asyncio.sleep(10)))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


def test_attempt(caplog):
    assert attempt(json.loads, "[1, 2]") == Success([1, 2])

    with caplog.at_level(logging.DEBUG, logger="remotedata"):
        result = attempt(json.loads, "[1, 2")
    assert isinstance(result, Failure)
    assert isinstance(result.error, json.JSONDecodeError)
    assert "loads" in caplog.text


def test_attempt_catch():
    assert isinstance(attempt(int, "x", catch=ValueError), Failure)
    assert attempt(int, "12", base=16) == Success(18)
    with pytest.raises(ValueError):
        attempt(int, "x", catch=KeyError)
