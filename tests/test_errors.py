"""Test error messages and formatted context."""

from sos.errors import ConfigError, UnconsumedTokensError
from sos.sequence import TokenSequence


class TestConfigError:
    def test_format(self):
        err = ConfigError("bad value", "conf/sos.toml")
        assert err.format() == "error: bad value\n  --> conf/sos.toml"

    def test_str_is_formatted(self):
        err = ConfigError("bad value")
        assert str(err).startswith("error: bad value")
        assert "sos.toml" in str(err)

    def test_fields(self):
        err = ConfigError("bad value", "x.toml")
        assert err.message == "bad value"
        assert err.path == "x.toml"


class TestUnconsumedTokensError:
    def test_format_underlines_tokens(self):
        err = UnconsumedTokensError(TokenSequence.new("X", "YY"))
        assert err.format() == "error: 2 unexpected token(s)\n  |\n  | X YY\n  | ^ ^^"

    def test_carries_rest(self):
        rest = TokenSequence.new("-z")
        err = UnconsumedTokensError(rest)
        assert err.rest is rest
        assert err.message == "1 unexpected token(s)"

    def test_format_contains_error_prefix(self):
        err = UnconsumedTokensError(TokenSequence.new("X"))
        assert err.format().startswith("error:")
