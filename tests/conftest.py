"""Global test fixtures."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

import erplookup.cli.console as console_module
from erplookup.config import ERPNextConfig
from erplookup.infrastructure.erpnext.client import ERPNextClient

Handler = Callable[[httpx.Request], httpx.Response]

SITE_URL = "https://erp.example.com"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep tests away from the real home directory, .env files and ERPLOOKUP_* vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)
    for var in (
        "ERPLOOKUP_CONFIG_FILE",
        "ERPLOOKUP_DATA_DIR",
        "ERPLOOKUP_ERPNEXT__URL",
        "ERPLOOKUP_ERPNEXT__API_KEY",
        "ERPLOOKUP_ERPNEXT__API_SECRET",
        "ERPLOOKUP_LOGGING__LEVEL",
        "ERPLOOKUP_LOGGING__FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    # Wide output so assertions are not split by line wrapping
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setattr(console_module, "_default", None)
    return home


@pytest.fixture
def erpnext_config() -> ERPNextConfig:
    return ERPNextConfig(url=SITE_URL, api_key="key", api_secret="secret", retries=0)


@pytest.fixture
def make_client(erpnext_config: ERPNextConfig) -> Callable[[Handler], ERPNextClient]:
    """Build an ERPNextClient whose requests are answered by a handler."""

    def factory(handler: Handler) -> ERPNextClient:
        return ERPNextClient(erpnext_config, transport=httpx.MockTransport(handler))

    return factory
