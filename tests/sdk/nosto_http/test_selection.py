import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

import nosto
import nosto.http
from nosto._config import Config
from nosto.http import HttpxAdapter, SocketAdapter, _selection, httpx_available, select_adapter
from nosto.http._httpx_adapter import HttpxAdapter as HttpxAdapterImpl
from nosto.models.errors import ConfigurationError

_SRC_PATH = Path(__file__).resolve().parents[3] / "src"


def _run_without_httpx(code: str) -> subprocess.CompletedProcess[str]:
    """Run ``code`` in a fresh interpreter where ``import httpx`` fails."""
    script = "import sys\nsys.modules['httpx'] = None\n" + textwrap.dedent(code)
    pythonpath = os.pathsep.join(
        path for path in (str(_SRC_PATH), os.environ.get("PYTHONPATH")) if path
    )
    return subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": pythonpath},
        check=False,
    )


class TestSelectAdapter:
    def test_httpx_is_available(self) -> None:
        assert httpx_available() is True

    def test_auto_prefers_httpx(self) -> None:
        assert isinstance(select_adapter(Config()), HttpxAdapter)

    def test_forced_socket(self) -> None:
        assert isinstance(select_adapter(Config(adapter="socket")), SocketAdapter)

    def test_forced_httpx(self) -> None:
        assert isinstance(select_adapter(Config(adapter="httpx")), HttpxAdapter)

    def test_auto_falls_back_to_socket(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setattr(_selection, "httpx_available", lambda: False)

        with caplog.at_level(logging.WARNING, logger="nosto"):
            adapter = select_adapter(Config())

        assert isinstance(adapter, SocketAdapter)
        assert "falling back to the socket adapter" in caplog.text

    def test_forced_httpx_unavailable_raises(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(_selection, "httpx_available", lambda: False)

        with pytest.raises(ConfigurationError):
            select_adapter(Config(adapter="httpx"))

    def test_reads_config_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOSTO_HTTP_ADAPTER", "SOCKET")

        assert isinstance(select_adapter(), SocketAdapter)

    class TestWithoutHttpx:
        def test_request_falls_back_to_socket_adapter(self) -> None:
            result = _run_without_httpx(
                """
                import logging

                logging.basicConfig(
                    level=logging.WARNING, stream=sys.stdout, format="%(message)s"
                )

                from nosto.http import HttpRequest

                print(type(HttpRequest().adapter).__name__)
                """
            )

            assert result.returncode == 0, result.stderr
            lines = result.stdout.splitlines()
            assert "httpx is not available; falling back to the socket adapter" in lines
            assert lines[-1] == "SocketAdapter"

        def test_package_imports(self) -> None:
            result = _run_without_httpx(
                """
                import nosto
                from nosto.http import httpx_available

                print(httpx_available(), nosto.SocketAdapter.__name__)
                """
            )

            assert result.returncode == 0, result.stderr
            assert result.stdout.strip() == "False SocketAdapter"

        def test_forced_httpx_raises_configuration_error(self) -> None:
            result = _run_without_httpx(
                """
                from nosto._config import Config
                from nosto.http import select_adapter
                from nosto.models.errors import ConfigurationError

                try:
                    select_adapter(Config(adapter="httpx"))
                except ConfigurationError as e:
                    print(type(e).__name__)
                """
            )

            assert result.returncode == 0, result.stderr
            assert result.stdout.strip() == "ConfigurationError"


class TestLazyHttpxAdapter:
    def test_resolves_from_http_package(self) -> None:
        assert nosto.http.HttpxAdapter is HttpxAdapterImpl

    def test_resolves_from_top_level_package(self) -> None:
        assert nosto.HttpxAdapter is HttpxAdapterImpl

    def test_unknown_attribute_raises(self) -> None:
        with pytest.raises(AttributeError):
            nosto.http.NoSuchAdapter  # noqa: B018
