import pytest

from apitest.services import DEFAULT_REGISTRY, env_var_for
from apitest.settings import Settings

_ENV_VARS = ("TEST_ENV", "BASE_URL", "API_TIMEOUT", *(env_var_for(name) for name in DEFAULT_REGISTRY))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Start every test without service variables and away from any real .env file."""
    for name in _ENV_VARS:
        # setenv first so monkeypatch also undoes values python-dotenv writes later.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        services={
            "api": "http://api.mock.local",
            "payments": "http://payments.mock.local:9000",
        },
    )
