"""Tests for the exception hierarchy."""

from zentao_mcp.exceptions import ArgumentError, HTTPError, SetupError, ZenTaoError


class TestExceptionHierarchy:
    def test_setup_error_is_zentao_error(self):
        assert issubclass(SetupError, ZenTaoError)

    def test_argument_error_is_zentao_error(self):
        assert issubclass(ArgumentError, ZenTaoError)

    def test_http_error_not_zentao_error(self):
        assert not issubclass(HTTPError, ZenTaoError)

    def test_exit_codes(self):
        assert ZenTaoError.exit_code == 1
        assert ArgumentError.exit_code == 1
        assert SetupError.exit_code == 2

    def test_http_error_fields(self):
        err = HTTPError(404, "Not Found", "missing")
        assert str(err) == "HTTP 404: Not Found"
        assert (err.code, err.body, err.headers) == (404, "missing", {})
