"""Unit tests for session token extraction in user routes."""

from starlette.requests import Request

from devproof.interface.api.routes.users import extract_session_token


def _request(headers: dict[str, str]) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/api/user/me",
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in headers.items()
            ],
        }
    )


class TestExtractSessionToken:
    def test_bearer_header(self):
        request = _request({"Authorization": "Bearer abc.def.ghi"})

        assert extract_session_token(request, "__session") == "abc.def.ghi"

    def test_bearer_scheme_is_case_insensitive(self):
        request = _request({"Authorization": "bearer abc.def.ghi"})

        assert extract_session_token(request, "__session") == "abc.def.ghi"

    def test_session_cookie(self):
        request = _request({"Cookie": "theme=dark; __session=cookie.token"})

        assert extract_session_token(request, "__session") == "cookie.token"

    def test_header_takes_precedence_over_cookie(self):
        request = _request(
            {"Authorization": "Bearer header.token", "Cookie": "__session=cookie.token"}
        )

        assert extract_session_token(request, "__session") == "header.token"

    def test_other_schemes_fall_back_to_cookie(self):
        request = _request({"Authorization": "Basic dXNlcjpwYXNz"})

        assert extract_session_token(request, "__session") is None

    def test_no_credentials(self):
        assert extract_session_token(_request({}), "__session") is None
