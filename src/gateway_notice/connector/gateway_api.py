"""Gateway API connector - Environment and rule-metadata services.

Both services answer JSON over HTTP. Every failure mode (transport error,
non-2xx status, body that is not the expected JSON object) is mapped to
ConfigFetchError or RuleFetchError so callers handle one exception type per
service.
"""

import logging
from typing import Any

import httpx

from gateway_notice.config import Settings
from gateway_notice.errors import ConfigFetchError, RuleFetchError
from gateway_notice.model.environment import EnvironmentPayload, RuleMetadata

logger = logging.getLogger(__name__)


class GatewayApiClient:
    """Async client for the environment and rule-metadata services.

    Example:
        >>> async with GatewayApiClient(settings) as api:
        ...     env = await api.fetch_environment()
        ...     rule, raw = await api.fetch_rule("4-5-6")
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        cookie_header: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Supplies base URL, endpoint paths and timeout.
            transport: Optional transport override (tests use MockTransport).
            cookie_header: Raw ``Cookie`` header forwarded from the user's request.
        """
        self.settings = settings
        headers = {"Accept": "application/json"}
        if cookie_header and cookie_header.isascii():
            headers["Cookie"] = cookie_header
        elif cookie_header:
            logger.warning("Not forwarding Cookie header: contains non-ASCII characters")
        self._client = httpx.AsyncClient(
            base_url=settings.api_base_url,
            headers=headers,
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GatewayApiClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_environment(self) -> EnvironmentPayload:
        """Fetch theme, debug flag and policy-list configuration.

        Raises:
            ConfigFetchError: On any transport, status or payload problem.
        """
        try:
            data = await self._get_json(self.settings.env_path)
            return EnvironmentPayload.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            raise ConfigFetchError(f"Failed to fetch environment config: {e}") from e

    async def fetch_rule(self, rule_id: str) -> tuple[RuleMetadata, dict[str, Any]]:
        """Fetch metadata for a gateway rule.

        Returns:
            The parsed metadata and the raw JSON object (for debug display).

        Raises:
            RuleFetchError: On any transport, status or payload problem.
        """
        try:
            data = await self._get_json(self.settings.rule_path, params={"rule_id": rule_id})
            return RuleMetadata.model_validate(data), data
        except (httpx.HTTPError, ValueError) as e:
            raise RuleFetchError(f"Failed to fetch rule metadata: {e}", rule_id=rule_id) from e

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object from {path}, got {type(data).__name__}")
        logger.debug("GET %s -> %s", response.request.url, response.status_code)
        return data
