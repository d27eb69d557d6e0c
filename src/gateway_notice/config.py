"""Configuration management for gateway-notice.

Settings come from built-in defaults, optionally overridden by a YAML file.
The file location is, in order: the explicit path, ``$GATEWAY_NOTICE_CONFIG``,
``~/.gateway-notice/config.yaml``.

Example config.yaml:

    api_base_url: http://127.0.0.1:8080
    ticket_url: https://jira.example.net/secure/CreateIssueDetails!init.jspa
    allowlist: 1-2-3, 4-5-6
    exclusions:
      - 0d5c2e6a-1111-2222-3333-444455556666
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from gateway_notice.engine.normalizer import normalize
from gateway_notice.engine.state import DEFAULT_PORTAL_URL
from gateway_notice.model.environment import EnvironmentPayload
from gateway_notice.model.policy import ConfigValue, PolicyIdSet

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GATEWAY_NOTICE_CONFIG"

DEFAULT_ALLOWLIST = PolicyIdSet((
    "1-2-3",  # Example test page policy
    "4-5-6",  # Block DNS Security Categories
    "7-8-9",  # Block Network Security Categories
))


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    api_base_url: str = "http://127.0.0.1:8080"
    env_path: str = "/api/env"
    rule_path: str = "/api/gateway"
    request_timeout: float = 10.0
    organization: str = "Zero Security Corp"
    ticket_url: str = "https://jira.0secuirty.net"
    portal_url: str = DEFAULT_PORTAL_URL
    primary_color: str = "#ffadfc"
    secondary_color: str = "#a30adb"
    debug: bool = False
    allowlist: PolicyIdSet = field(default_factory=lambda: DEFAULT_ALLOWLIST)
    exclusions: PolicyIdSet = field(default_factory=PolicyIdSet)

    def with_environment(self, payload: EnvironmentPayload) -> "Settings":
        """Apply environment-service overrides.

        Theme, allowlist block and exclusion block are independent; each one
        only overrides what it actually carries.
        """
        changes: dict[str, Any] = {"debug": payload.debug_enabled}

        if payload.theme is not None:
            if payload.theme.primary:
                changes["primary_color"] = payload.theme.primary
            if payload.theme.secondary:
                changes["secondary_color"] = payload.theme.secondary

        if payload.bugs is not None:
            if not payload.bugs.policy_value.is_absent:
                changes["allowlist"] = normalize(payload.bugs.policy_value)
            if payload.bugs.ticket_base_url:
                changes["ticket_url"] = payload.bugs.ticket_base_url

        if payload.exclusions is not None and not payload.exclusions.policy_value.is_absent:
            changes["exclusions"] = normalize(payload.exclusions.policy_value)

        return replace(self, **changes)


def default_config_path() -> Path:
    """Config file location when none is given explicitly."""
    env_config = os.getenv(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config).expanduser()
    return Path.home() / ".gateway-notice" / "config.yaml"


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings, falling back to defaults for anything not configured."""
    config_file = Path(path).expanduser() if path else default_config_path()
    if not config_file.exists():
        return Settings()

    try:
        raw = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return Settings()

    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_file)
        return Settings()

    return settings_from_mapping(raw)


def settings_from_mapping(raw: dict[str, Any]) -> Settings:
    """Build Settings from a parsed config mapping. Unknown keys are ignored."""
    known = {f.name for f in fields(Settings)}
    changes: dict[str, Any] = {}

    for key, value in raw.items():
        if key not in known or value is None:
            continue
        if key in ("allowlist", "exclusions"):
            tagged = ConfigValue.from_raw(value)
            if not tagged.is_absent:
                changes[key] = normalize(tagged)
        elif key == "request_timeout":
            try:
                changes[key] = float(value)
            except (TypeError, ValueError):
                logger.warning("Ignoring request_timeout %r: not a number", value)
        elif key == "debug":
            changes[key] = value is True or (isinstance(value, str) and value.lower() == "true")
        else:
            changes[key] = str(value)

    return replace(Settings(), **changes)
