"""Tests for fallible.core.errors module."""

import pytest

from fallible.core.errors import ConfigError, FallibleError, UnwrapError, render_value


class TestFallibleError:
    """Test FallibleError base class."""

    def test_message(self):
        error = FallibleError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"
        assert error.cause is None

    def test_cause_is_chained(self):
        original = ConnectionError("DNS lookup failed")
        error = FallibleError("Network error", cause=original)
        assert error.cause is original
        assert error.__cause__ is original

    def test_to_dict(self):
        d = FallibleError("Test error").to_dict()
        assert d == {"error_type": "FallibleError", "message": "Test error"}

    def test_to_dict_with_cause(self):
        d = UnwrapError("bad", cause=ValueError("inner")).to_dict()
        assert d["error_type"] == "UnwrapError"
        assert d["cause"] == "inner"

    def test_repr(self):
        assert repr(UnwrapError("x")) == "UnwrapError('x')"


class TestHierarchy:
    @pytest.mark.parametrize("cls", [UnwrapError, ConfigError])
    def test_subclasses(self, cls):
        assert issubclass(cls, FallibleError)
        assert issubclass(cls, Exception)

    def test_unwrap_error_catchable_as_base(self):
        with pytest.raises(FallibleError):
            raise UnwrapError("wrong variant")


class TestRenderValue:
    def test_short_values_use_repr(self):
        assert render_value("x") == "'x'"
        assert render_value({"a": 1}) == "{'a': 1}"
        assert render_value(None) == "None"

    def test_long_values_are_truncated(self):
        rendered = render_value("y" * 1000)
        assert len(rendered) == 200
        assert rendered.endswith("...")

    def test_ignores_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FALLIBLE_REPR_MAX_LENGTH", "32")
        (tmp_path / ".env").write_text("FALLIBLE_LOG_LEVEL=bogus\n")
        assert len(render_value(list(range(100)))) == 200

    def test_broken_repr_falls_back(self):
        class BrokenRepr:
            def __repr__(self):
                raise RuntimeError("repr failed")

        rendered = render_value(BrokenRepr())
        assert rendered.startswith("<")
        assert "BrokenRepr object at" in rendered
