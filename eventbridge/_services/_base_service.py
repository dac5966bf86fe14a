from logging import getLogger
from typing import Any, Optional

from httpx import URL, Request
from pydantic_core import to_jsonable_python

from .._config import Config
from .._utils import Options, RequestSpec, Service, normalize_options
from .._utils.constants import HEADER_TARGET, SERVICE_HOST_TEMPLATE


class BaseService:
    def __init__(self, config: Config) -> None:
        self._logger = getLogger("eventbridge")
        self._config = config

    def endpoint_url(self, service: Service) -> str:
        """Base URL the given service is reached at.

        An explicit `endpoint_url` in the config wins over the regional host.
        """
        if self._config.endpoint_url:
            return self._config.endpoint_url.rstrip("/")

        host = SERVICE_HOST_TEMPLATE.format(
            service=service.value, region=self._config.region
        )
        return f"https://{host}"

    def build_request(self, spec: RequestSpec) -> Request:
        """Materializes a spec into an unsent `httpx.Request`.

        Signing and sending are left to whoever dispatches the request.
        """
        url = URL(f"{self.endpoint_url(spec.service)}{spec.endpoint}")

        self._logger.debug(f"Request: {spec.method} {url}")
        self._logger.debug(f"TARGET: {spec.header(HEADER_TARGET)}")

        return Request(
            spec.method,
            url,
            headers=list(spec.headers),
            json=to_jsonable_python(
                dict(spec.json), by_alias=True, exclude_none=True
            ),
        )

    def _options_body(
        self, options: Optional[Options], kwargs: dict[str, Any]
    ) -> dict[str, Any]:
        return {**normalize_options(options), **normalize_options(kwargs)}
