import pytest

from license_preamble import config
from license_preamble.catalog import get_catalog

ENV_VARS = (
    "LICENSE_PREAMBLE_LICENSE_FILE",
    "LICENSE_PREAMBLE_PREAMBLE_FILE",
    "LICENSE_PREAMBLE_ROOTS",
    "LICENSE_PREAMBLE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def reset_preamble_state(monkeypatch):
    """Reset config and the catalog cache between every test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    config.reload()
    get_catalog.cache_clear()

    yield

    get_catalog.cache_clear()
    config.reload()


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Empty project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
