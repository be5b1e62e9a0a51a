from hypothesis import given
from hypothesis.strategies import builds, integers, lists, text, one_of

from remotedata import (
    Failure, Loading, NotAsked, Success, Some, Nothing, Ok, Err,
    to_option, from_option, to_optional, from_optional, to_result, from_result, from_list,
    is_success,
)
from strategies import remote_data, successes, pending


results = one_of(builds(Ok, integers()), builds(Err, text()))


@given(remote_data)
def test_to_option(d):
    if is_success(d):
        assert to_option(d) == Some(d.value)
    else:
        assert to_option(d) == Nothing()


@given(integers())
def test_option_round_trip(x):
    assert to_option(from_option(Some(x), "e")) == Some(x)


def test_from_option():
    assert from_option(Nothing(), "e") == Failure("e")
    assert from_option(Some(None), "e") == Success(None)


def test_optional():
    assert to_optional(Success(1)) == 1
    assert to_optional(Loading()) is None
    assert from_optional(0, "e") == Success(0)
    assert from_optional(None, "e") == Failure("e")


def test_to_result():
    assert to_result(Success(1), "fallback") == Ok(1)
    assert to_result(Failure("e"), "fallback") == Err("e")
    assert to_result(NotAsked(), "fallback") == Err("fallback")
    assert to_result(Loading(), "fallback") == Err("fallback")


@given(results)
def test_result_round_trip(r):
    assert to_result(from_result(r), "fallback") == r


def test_from_result():
    assert from_result(Ok(1)) == Success(1)
    assert from_result(Err("e")) == Failure("e")
    assert Ok(0) and not Err("e")


def test_from_list():
    assert from_list([]) == Success([])
    assert from_list([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])
    assert from_list([Failure("e"), Success(2), Success(3)]) == Failure("e")
    assert from_list([Success(1), NotAsked(), Success(3)]) == NotAsked()


def test_from_list_precedence():
    assert from_list([Loading(), NotAsked()]) == NotAsked()
    assert from_list([NotAsked(), Loading()]) == NotAsked()
    assert from_list([Loading(), Success(1)]) == Loading()
    assert from_list([NotAsked(), Failure("e1"), Failure("e2")]) == Failure("e1")
    assert from_list([Loading(), Success(1), Failure("e")]) == Failure("e")


def test_from_list_iterable():
    assert from_list(Success(i) for i in range(3)) == Success([0, 1, 2])


@given(lists(successes))
def test_from_list_successes(ds):
    assert from_list(ds) == Success([d.value for d in ds])


@given(lists(one_of(successes, pending), min_size=1))
def test_from_list_pending(ds):
    result = from_list(ds)
    if any(isinstance(d, NotAsked) for d in ds):
        assert result == NotAsked()
    elif any(isinstance(d, Loading) for d in ds):
        assert result == Loading()
    else:
        assert is_success(result)


@given(lists(remote_data))
def test_from_list_first_failure(ds):
    failures = [d for d in ds if isinstance(d, Failure)]
    if failures:
        assert from_list(ds) == failures[0]


def test_from_list_does_not_alias():
    items = [Success(i) for i in range(1000)]
    first = from_list(items)
    second = from_list(items)
    assert first == Success(list(range(1000)))
    assert first.value is not second.value
    assert from_list([]).value is not from_list([]).value
