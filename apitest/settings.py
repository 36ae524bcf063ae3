"""Environment-driven configuration for the service request helpers."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from dotenv import find_dotenv, load_dotenv

from apitest.services import DEFAULT_REGISTRY, ServiceRegistry, env_var_for

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when the environment does not describe the requested services."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for the resolved test-environment configuration."""

    services: Mapping[str, str] | None
    environment: str = "local"
    api_timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.services is not None and not isinstance(self.services, MappingProxyType):
            object.__setattr__(self, "services", MappingProxyType(dict(self.services)))

    @classmethod
    def load(cls, registry: ServiceRegistry = DEFAULT_REGISTRY) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv reads ``.env.<TEST_ENV>`` and then ``.env`` (searched upward
        from the working directory) so developers can keep per-environment URLs
        in files without exporting variables globally.
        Variables already present in the process environment always win.
        """
        environment = os.getenv("TEST_ENV", "").strip() or "local"
        for filename in (f".env.{environment}", ".env"):
            dotenv_path = find_dotenv(filename, usecwd=True)
            if dotenv_path:
                load_dotenv(dotenv_path)

        services: dict[str, str] = {}
        for name in registry:
            url = os.getenv(env_var_for(name), "").strip()
            if url:
                services[name] = url.rstrip("/")

        base_url = os.getenv("BASE_URL", "").strip()
        if base_url and registry.default not in services:
            services[registry.default] = base_url.rstrip("/")

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ConfigurationError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ConfigurationError("API_TIMEOUT must be greater than zero.")

        logger.debug(
            "Loaded test environment settings",
            extra={"environment": environment, "services": sorted(services)},
        )
        return cls(
            services=services or None,
            environment=environment,
            api_timeout=api_timeout,
        )
