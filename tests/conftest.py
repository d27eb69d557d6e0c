"""Pytest configuration and fixtures for gateway-notice tests."""

import json

import httpx
import pytest

from gateway_notice.config import Settings
from gateway_notice.model.policy import PolicyIdSet


class FakeGatewayApi:
    """Stands in for the environment and rule-metadata services.

    Records every request so tests can assert on what was fetched.
    """

    def __init__(self) -> None:
        self.env_payload: object = {}
        self.env_status = 200
        self.rule_payloads: dict[str, object] = {}
        self.rule_status = 200
        self.requests: list[httpx.Request] = []
        self.fail_transport = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_transport:
            raise httpx.ConnectError("connection refused", request=request)

        if request.url.path == "/api/env":
            return httpx.Response(self.env_status, content=json.dumps(self.env_payload))

        if request.url.path == "/api/gateway":
            rule_id = request.url.params.get("rule_id", "")
            if rule_id not in self.rule_payloads:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(self.rule_status, content=json.dumps(self.rule_payloads[rule_id]))

        return httpx.Response(404)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_api():
    """Fake collaborator services with an empty environment payload."""
    return FakeGatewayApi()


@pytest.fixture
def settings():
    """Settings pointing at the fake services and a test ticket system."""
    return Settings(
        api_base_url="http://gateway.test",
        ticket_url="https://tickets.example.net/secure/CreateIssue",
        allowlist=PolicyIdSet(("4-5-6",)),
    )


@pytest.fixture
def blocked_params():
    """Query parameters of a typical DNS block redirect."""
    return {
        "cf_rule_id": "qqq",
        "cf_site_uri": "https://evil.test/login?next=/",
        "cf_filter": "dns",
        "cf_account_id": "acct-42",
        "cf_user_email": "jo@example.com",
        "cf_request_category_names": '["Phishing", "New Domains"]',
    }
