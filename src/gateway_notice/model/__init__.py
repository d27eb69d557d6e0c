"""Model package - Core data structures for gateway-notice."""

from gateway_notice.model.context import BlockContext, extract_context, parse_categories
from gateway_notice.model.environment import (
    EnvironmentPayload,
    PolicyBlock,
    RuleMetadata,
    ThemeOverrides,
)
from gateway_notice.model.policy import ConfigValue, PolicyIdSet, PolicyOutcome, ValueKind

__all__ = [
    "BlockContext",
    "ConfigValue",
    "EnvironmentPayload",
    "PolicyBlock",
    "PolicyIdSet",
    "PolicyOutcome",
    "RuleMetadata",
    "ThemeOverrides",
    "ValueKind",
    "extract_context",
    "parse_categories",
]
