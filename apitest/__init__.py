"""
Request helpers for integration tests against one or more backend services.

Base URLs come from the environment (optionally through ``.env`` files); the
returned builders can be decorated further and then awaited to execute.
"""

from apitest.builders import (
    build_delete_request,
    build_get_request,
    build_patch_request,
    build_post_request,
    build_put_request,
)
from apitest.decorators import with_api_key, with_auth, with_headers, with_query_params
from apitest.factory import RequestFactory, create_request
from apitest.request import RequestBuilder, RequestBuilderError
from apitest.services import DEFAULT_REGISTRY, ServiceName, ServiceRegistry
from apitest.settings import ConfigurationError, Settings

__all__ = [
    "DEFAULT_REGISTRY",
    "ConfigurationError",
    "RequestBuilder",
    "RequestBuilderError",
    "RequestFactory",
    "ServiceName",
    "ServiceRegistry",
    "Settings",
    "build_delete_request",
    "build_get_request",
    "build_patch_request",
    "build_post_request",
    "build_put_request",
    "create_request",
    "with_api_key",
    "with_auth",
    "with_headers",
    "with_query_params",
]
