"""Request factory resolving a service's base URL from the test environment."""

import logging
from dataclasses import dataclass, field

import httpx

from apitest.request import RequestBuilder
from apitest.services import DEFAULT_REGISTRY, ServiceName, ServiceRegistry, env_var_for
from apitest.settings import ConfigurationError, Settings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RequestFactory:
    """Builds fresh request builders for the services described by ``settings``."""

    settings: Settings
    registry: ServiceRegistry = DEFAULT_REGISTRY
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)

    @classmethod
    def from_env(
        cls,
        registry: ServiceRegistry = DEFAULT_REGISTRY,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RequestFactory":
        """Factory that loads Settings from the process environment."""
        return cls(Settings.load(registry), registry, transport)

    def resolve_base_url(self, service_name: ServiceName | str | None = None) -> str:
        """Return the configured base URL for ``service_name`` (default service when omitted)."""
        services = self.settings.services
        if services is None:
            logger.error(
                "Services not configured in environment",
                extra={"environment": self.settings.environment},
            )
            raise ConfigurationError(
                "Services not configured in environment file.\n"
                "Ensure your environment config includes the services mapping."
            )

        name = self.registry.default if not service_name else self.registry.normalize(service_name)
        if name not in self.registry:
            logger.error(
                "Service is not registered",
                extra={"service": name, "registered": list(self.registry.names)},
            )
            raise ConfigurationError(
                f'Service "{name}" is not a registered service.\n'
                f"Registered services: {', '.join(self.registry.names)}\n"
                f"Configured services: {', '.join(services)}"
            )

        base_url = services.get(name)
        if not base_url:
            available = ", ".join(services)
            logger.error(
                "Service not configured in environment",
                extra={"service": name, "available": list(services)},
            )
            raise ConfigurationError(
                f'Service "{name}" not configured in environment.\n'
                f"Available services: {available}\n"
                f"Check your .env file for the {env_var_for(name)} variable."
            )

        logger.debug("Resolved service base URL", extra={"service": name, "base_url": base_url})
        return base_url

    def create(self, service_name: ServiceName | str | None = None) -> RequestBuilder:
        """Return a new builder targeting the resolved service; nothing is sent."""
        return RequestBuilder(
            self.resolve_base_url(service_name),
            timeout=self.settings.api_timeout,
            transport=self.transport,
        )


def create_request(
    service_name: ServiceName | str | None = None,
    *,
    settings: Settings | None = None,
    registry: ServiceRegistry = DEFAULT_REGISTRY,
) -> RequestBuilder:
    """
    Create a request builder for ``service_name``.

    Single-service projects can omit the name and get the first registered
    service. When ``settings`` is not supplied the environment is re-read on
    every call.

        create_request().get("/users")
        create_request(ServiceName.PAYMENTS).get("/transactions")
    """
    if settings is None:
        settings = Settings.load(registry)
    return RequestFactory(settings, registry).create(service_name)
