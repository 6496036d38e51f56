"""Tests for fallible.core.option module."""

import dataclasses

import pytest

from fallible.core.errors import UnwrapError
from fallible.core.option import (
    Nothing,
    Some,
    all_some,
    any_some,
    from_nullable,
    none,
    some,
)
from fallible.core.result import Err, Ok


class TestConstruction:
    def test_some_factory(self):
        option = some(42)
        assert isinstance(option, Some)
        assert option.tag == "Some"
        assert option.unwrap() == 42

    def test_none_factory(self):
        option = none()
        assert isinstance(option, Nothing)
        assert option.tag == "None"

    def test_some_may_hold_none(self):
        option = some(None)
        assert option.is_some()
        assert option.unwrap() is None

    @pytest.mark.parametrize("option", [Some(1), Some(None), Nothing()])
    def test_exactly_one_variant(self, option):
        assert option.is_some() != option.is_none()

    def test_nothing_instances_are_equal(self):
        assert Nothing() == Nothing()
        assert none() == Nothing()
        assert hash(Nothing()) == hash(Nothing())

    def test_some_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Some(1).value = 2

    def test_repr(self):
        assert repr(Some("a")) == "Some('a')"
        assert repr(Nothing()) == "Nothing"


class TestFromNullable:
    def test_none_is_nothing(self):
        assert from_nullable(None) == Nothing()

    @pytest.mark.parametrize("value", [0, "", False, []])
    def test_falsy_values_are_some(self, value):
        assert from_nullable(value) == Some(value)


class TestInspection:
    def test_is_some_and(self, spy):
        predicate = spy(returns=True)
        assert Some(2).is_some_and(predicate) is True
        assert predicate.calls == [(2,)]
        assert Some(2).is_some_and(lambda x: x > 5) is False

    def test_is_some_and_short_circuits(self, spy):
        predicate = spy(returns=True)
        assert Nothing().is_some_and(predicate) is False
        assert predicate.count == 0

    def test_is_none_or(self, spy):
        predicate = spy(returns=False)
        assert Nothing().is_none_or(predicate) is True
        assert predicate.count == 0
        assert Some(1).is_none_or(predicate) is False
        assert Some(1).is_none_or(lambda x: x == 1) is True


class TestExtraction:
    def test_unwrap(self):
        assert Some(1).unwrap() == 1
        with pytest.raises(UnwrapError, match="Called unwrap on a None value"):
            Nothing().unwrap()

    def test_expect(self):
        assert Some(1).expect("unused") == 1
        with pytest.raises(UnwrapError, match="^custom message$"):
            Nothing().expect("custom message")

    def test_unwrap_or(self):
        assert Some(1).unwrap_or(0) == 1
        assert Nothing().unwrap_or(0) == 0

    def test_unwrap_or_else_zero_args(self, spy):
        fallback = spy(returns=7)
        assert Some(1).unwrap_or_else(fallback) == 1
        assert fallback.count == 0
        assert Nothing().unwrap_or_else(fallback) == 7
        assert fallback.calls == [()]


class TestTransformation:
    def test_map(self, spy):
        f = spy(returns="x")
        assert Some(1).map(f) == Some("x")
        assert Nothing().map(f) == Nothing()
        assert f.count == 1

    def test_map_to_none_stays_present(self):
        assert Some(1).map(lambda _: None) == Some(None)

    def test_map_or(self, spy):
        f = spy(returns="mapped")
        assert Some(1).map_or("default", f) == "mapped"
        assert Nothing().map_or("default", f) == "default"
        assert f.count == 1

    def test_map_or_else_invokes_exactly_one(self, spy):
        default_f = spy(returns="default")
        f = spy(returns="mapped")

        assert Some(1).map_or_else(default_f, f) == "mapped"
        assert (default_f.count, f.count) == (0, 1)

        assert Nothing().map_or_else(default_f, f) == "default"
        assert (default_f.count, f.count) == (1, 1)
        assert default_f.calls == [()]

    def test_inspect(self, spy):
        hook = spy()
        option = Some(3)
        assert option.inspect(hook) is option
        assert hook.calls == [(3,)]
        absent = Nothing()
        assert absent.inspect(hook) is absent
        assert hook.count == 1

    def test_filter(self, spy):
        predicate = spy(returns=True)
        option = Some(4)
        assert option.filter(predicate) is option
        assert Some(3).filter(lambda x: x % 2 == 0) == Nothing()

    def test_filter_never_calls_predicate_on_nothing(self, spy):
        predicate = spy(returns=True)
        assert Nothing().filter(predicate) == Nothing()
        assert predicate.count == 0


class TestCombination:
    def test_and(self):
        assert Some(1).and_(Some("b")) == Some("b")
        assert Some(1).and_(Nothing()) == Nothing()
        assert Nothing().and_(Some("b")) == Nothing()

    def test_or(self):
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing().or_(Some(2)) == Some(2)
        assert Nothing().or_(Nothing()) == Nothing()

    def test_or_else_is_lazy(self, spy):
        fallback = spy(returns=Some("fallback"))
        assert Some(1).or_else(fallback) == Some(1)
        assert fallback.count == 0
        assert Nothing().or_else(fallback) == Some("fallback")
        assert fallback.count == 1

    def test_and_then(self):
        def parse(s: str):
            return Some(int(s)) if s.isdigit() else Nothing()

        assert Some("12").and_then(parse) == Some(12)
        assert Some("x").and_then(parse) == Nothing()
        assert Nothing().and_then(parse) == Nothing()

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            (Some(1), Nothing(), Some(1)),
            (Nothing(), Some(2), Some(2)),
            (Some(1), Some(2), Nothing()),
            (Nothing(), Nothing(), Nothing()),
        ],
    )
    def test_xor(self, left, right, expected):
        assert left.xor(right) == expected


class TestPairing:
    def test_zip(self):
        assert Some(1).zip(Some("a")) == Some((1, "a"))
        assert Some(1).zip(Nothing()) == Nothing()
        assert Nothing().zip(Some("a")) == Nothing()

    def test_zip_with(self, spy):
        f = spy(returns="combined")
        assert Some(1).zip_with(Some(2), f) == Some("combined")
        assert f.calls == [(1, 2)]
        assert Some(1).zip_with(Nothing(), f) == Nothing()
        assert Nothing().zip_with(Some(2), f) == Nothing()
        assert f.count == 1

    def test_unzip(self):
        assert Some((1, "a")).unzip() == (Some(1), Some("a"))
        assert Nothing().unzip() == (Nothing(), Nothing())

    def test_zip_then_unzip(self):
        assert Some(1).zip(Some(2)).unzip() == (Some(1), Some(2))


class TestConversion:
    def test_to_result(self):
        assert Some(1).to_result("missing") == Ok(1)
        assert Nothing().to_result("missing") == Err("missing")

    def test_to_result_else_exactly_once(self, spy):
        make_error = spy(returns="missing")
        assert Some(1).to_result_else(make_error) == Ok(1)
        assert make_error.count == 0
        assert Nothing().to_result_else(make_error) == Err("missing")
        assert make_error.calls == [()]

    def test_to_dict(self):
        assert Some([1]).to_dict() == {"some": True, "value": [1]}
        assert Nothing().to_dict() == {"some": False}


class TestPatternMatching:
    def test_match(self):
        def describe(option):
            match option:
                case Some(value):
                    return f"some {value}"
                case Nothing():
                    return "nothing"

        assert describe(Some(1)) == "some 1"
        assert describe(Nothing()) == "nothing"


class TestAllSome:
    def test_all_present(self):
        assert all_some([Some(1), Some(2)]) == Some([1, 2])

    def test_first_absence_short_circuits(self):
        seen = []

        def gen():
            for o in [Some(1), Nothing(), Some(3)]:
                seen.append(o)
                yield o

        assert all_some(gen()) == Nothing()
        assert seen == [Some(1), Nothing()]

    def test_empty(self):
        assert all_some([]) == Some([])

    def test_rejects_non_option(self):
        with pytest.raises(TypeError, match="expected Some or Nothing, got NoneType"):
            all_some([Some(1), None])


class TestAnySome:
    def test_first_present_wins(self):
        assert any_some([Nothing(), Some(2), Some(3)]) == Some(2)

    def test_all_absent(self):
        assert any_some([Nothing(), Nothing()]) == Nothing()

    def test_empty(self):
        assert any_some([]) == Nothing()

    def test_stops_consuming_at_first_some(self):
        seen = []

        def gen():
            for o in [Nothing(), Some(2), Some(3)]:
                seen.append(o)
                yield o

        assert any_some(gen()) == Some(2)
        assert seen == [Nothing(), Some(2)]

    def test_rejects_non_option(self):
        with pytest.raises(TypeError, match="expected Some or Nothing, got int"):
            any_some([Nothing(), 42])


class TestLaws:
    @pytest.mark.parametrize("option", [Some(3), Nothing()])
    def test_map_identity(self, option):
        assert option.map(lambda x: x) == option

    @pytest.mark.parametrize("option", [Some(3), Nothing()])
    def test_map_composition(self, option):
        f = lambda x: x + 1  # noqa: E731
        g = lambda x: x * 10  # noqa: E731
        assert option.map(f).map(g) == option.map(lambda x: g(f(x)))

    @pytest.mark.parametrize("option", [Some(3), Some(9), Nothing()])
    def test_and_then_associativity(self, option):
        f = lambda x: Some(x + 1) if x < 5 else Nothing()  # noqa: E731
        g = lambda x: Some(x * 2) if x % 2 == 0 else Nothing()  # noqa: E731
        assert option.and_then(f).and_then(g) == option.and_then(lambda x: f(x).and_then(g))
