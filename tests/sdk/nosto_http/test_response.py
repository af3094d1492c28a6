import pytest

from nosto.http import HttpResponse


class TestHttpResponse:
    @pytest.mark.parametrize(
        "status_code, expected",
        [(200, True), (204, True), (299, True), (301, False), (404, False), (500, False)],
    )
    def test_is_success(self, status_code: int, expected: bool) -> None:
        assert HttpResponse(status_code=status_code).is_success is expected

    def test_json(self) -> None:
        response = HttpResponse(status_code=200, content=b'{"a": [1, 2]}')

        assert response.json() == {"a": [1, 2]}

    def test_text_uses_charset(self) -> None:
        response = HttpResponse(
            status_code=200,
            headers={"content-type": "text/plain; charset=iso-8859-1"},
            content="Käse".encode("iso-8859-1"),
        )

        assert response.encoding == "iso-8859-1"
        assert response.text == "Käse"

    def test_unknown_charset_falls_back_to_utf8(self) -> None:
        response = HttpResponse(
            status_code=200,
            headers={"content-type": "text/plain; charset=nope"},
            content="Käse".encode("utf-8"),
        )

        assert response.text == "Käse"

    def test_message_is_none_on_success(self) -> None:
        assert HttpResponse(status_code=200, content=b'{"message": "x"}').message is None

    @pytest.mark.parametrize(
        "content, expected",
        [
            (b'{"message": "Invalid token"}', "Invalid token"),
            (b'{"error": "bad_request"}', "bad_request"),
            (b'{"detail": "Not found"}', "Not found"),
            (b"plain failure", "plain failure"),
            (b"", None),
        ],
    )
    def test_message(self, content: bytes, expected: str | None) -> None:
        assert HttpResponse(status_code=400, content=content).message == expected
