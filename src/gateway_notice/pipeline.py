"""Notice pipeline - Initialization shared by the web page and the CLI.

Public API:
    load_notice(params, settings, api) -> NoticeView   (fetches collaborators)
    build_view(context, settings) -> NoticeView        (offline, no fetch)
"""

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from gateway_notice.config import Settings
from gateway_notice.connector.gateway_api import GatewayApiClient
from gateway_notice.engine.state import NoticeDecision, NoticeInputs, NoticeState
from gateway_notice.errors import ConfigFetchError, RuleFetchError
from gateway_notice.model.context import BlockContext, extract_context
from gateway_notice.model.environment import RuleMetadata

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load rule or environment info."


@dataclass
class NoticeView:
    """Everything the notice page renders."""

    context: BlockContext
    settings: Settings
    decision: NoticeDecision
    rule: RuleMetadata | None = None
    rule_raw: dict[str, Any] | None = None
    error: str | None = None

    @property
    def rule_description(self) -> str:
        return self.rule.description if self.rule is not None else ""

    @property
    def show_categories(self) -> bool:
        """Matched categories are only listed for allowlisted rules."""
        return bool(self.context.request_categories) and (
            bool(self.context.rule_id) and self.context.rule_id in self.settings.allowlist
        )

    @property
    def rule_json(self) -> str:
        """Pretty-printed rule payload for the DEBUG panel."""
        return json.dumps(self.rule_raw or {}, indent=2, ensure_ascii=False)

    @property
    def show_rule_details(self) -> bool:
        return self.settings.debug and self.rule_raw is not None


def inputs_for(context: BlockContext, settings: Settings) -> NoticeInputs:
    return NoticeInputs(
        context=context,
        allowlist=settings.allowlist,
        exclusions=settings.exclusions,
        ticket_base_url=settings.ticket_url,
        portal_url=settings.portal_url,
    )


def build_view(context: BlockContext, settings: Settings) -> NoticeView:
    """Decide actions for a context using settings as-is."""
    state = NoticeState(inputs_for(context, settings))
    return NoticeView(context=context, settings=settings, decision=state.decision)


async def load_notice(
    params: Mapping[str, str] | Iterable[tuple[str, str]],
    settings: Settings,
    api: GatewayApiClient,
) -> NoticeView:
    """Build the notice for one page load.

    Fetches the environment config, then rule metadata when the context
    carries a rule id. The first failure stops the sequence; it is logged and
    replaced by a generic message, and the page renders with whatever
    configuration was resolved so far.
    """
    context = extract_context(params)
    resolved = settings
    rule: RuleMetadata | None = None
    rule_raw: dict[str, Any] | None = None
    error: str | None = None

    try:
        environment = await api.fetch_environment()
        resolved = settings.with_environment(environment)

        if context.rule_id:
            rule, rule_raw = await api.fetch_rule(context.rule_id)
    except (ConfigFetchError, RuleFetchError) as e:
        logger.error("Failed during init: %s", e)
        error = LOAD_ERROR_MESSAGE

    view = build_view(context, resolved)
    view.rule = rule
    view.rule_raw = rule_raw
    view.error = error
    return view
