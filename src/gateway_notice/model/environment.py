"""Payload models for the environment and rule-metadata services.

The environment payload mixes theme, debug flag and two policy-list blocks.
Each block is read independently; a block that is missing or carries an
unusable value leaves the corresponding setting untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gateway_notice.model.policy import ConfigValue


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


class ThemeOverrides(BaseModel):
    """``theme`` block of the environment payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary_color: Any = Field(None, alias="primaryColor")
    secondary_color: Any = Field(None, alias="secondaryColor")

    @property
    def primary(self) -> str | None:
        return _non_empty_str(self.primary_color)

    @property
    def secondary(self) -> str | None:
        return _non_empty_str(self.secondary_color)


class PolicyBlock(BaseModel):
    """``bugs`` (allowlist) or ``exclusions`` block of the environment payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    policy_ids: Any = Field(None, alias="policyIds")
    ticket_url: Any = Field(None, alias="ticketUrl")

    @property
    def policy_value(self) -> ConfigValue:
        return ConfigValue.from_raw(self.policy_ids)

    @property
    def ticket_base_url(self) -> str | None:
        return _non_empty_str(self.ticket_url)


class EnvironmentPayload(BaseModel):
    """Response of ``GET /api/env``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    theme: ThemeOverrides | None = None
    debug: Any = Field(None, alias="DEBUG")
    bugs: PolicyBlock | None = None
    exclusions: PolicyBlock | None = None

    @property
    def debug_enabled(self) -> bool:
        return self.debug == "true"


class RuleResult(BaseModel):
    """``result`` object of the rule-metadata response."""

    model_config = ConfigDict(extra="allow")

    description: Any = None


class RuleMetadata(BaseModel):
    """Response of ``GET /api/gateway?rule_id=...``.

    Only ``result.description`` is interpreted; the rest of the payload is
    shown verbatim in debug mode.
    """

    model_config = ConfigDict(extra="allow")

    result: RuleResult | None = None

    @property
    def description(self) -> str:
        """Human-readable rule description, or a placeholder."""
        if self.result is not None and self.result.description is not None:
            return str(self.result.description)
        return "No description provided."
