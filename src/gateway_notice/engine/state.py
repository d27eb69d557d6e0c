"""Notice state - Derived decisions kept in step with their inputs.

Outcome, ticket link and actions are pure functions of ``NoticeInputs``.
``NoticeState.update`` swaps the inputs and recomputes all three at once,
so the derived values can never describe a stale combination of inputs.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from gateway_notice.engine.classifier import classify
from gateway_notice.engine.presentation import ActionSet, select_actions
from gateway_notice.engine.ticket_link import build_ticket_link, resolve_domain
from gateway_notice.model.context import BlockContext
from gateway_notice.model.policy import PolicyIdSet, PolicyOutcome

DEFAULT_PORTAL_URL = "https://radar.cloudflare.com/domains"


@dataclass(frozen=True)
class NoticeInputs:
    """Everything the decisions depend on."""

    context: BlockContext = field(default_factory=BlockContext)
    allowlist: PolicyIdSet = field(default_factory=PolicyIdSet)
    exclusions: PolicyIdSet = field(default_factory=PolicyIdSet)
    ticket_base_url: str = ""
    portal_url: str = DEFAULT_PORTAL_URL


@dataclass(frozen=True)
class NoticeDecision:
    """Decisions derived from one NoticeInputs value."""

    domain: str
    outcome: PolicyOutcome
    ticket_link: str
    actions: ActionSet


def decide(inputs: NoticeInputs) -> NoticeDecision:
    """Run classifier, link builder and selector over one set of inputs."""
    domain = resolve_domain(inputs.context.site_uri)
    outcome = classify(inputs.context.rule_id, inputs.allowlist, inputs.exclusions)
    ticket_link = build_ticket_link(inputs.context, inputs.ticket_base_url)
    actions = select_actions(outcome, ticket_link, domain, inputs.portal_url)
    return NoticeDecision(domain=domain, outcome=outcome, ticket_link=ticket_link, actions=actions)


class NoticeState:
    """Holds the current inputs and the decision derived from them.

    Example:
        >>> state = NoticeState(NoticeInputs(allowlist=PolicyIdSet(("4-5-6",))))
        >>> state.update(context=BlockContext(rule_id="4-5-6"))
        >>> state.outcome
        <PolicyOutcome.ALLOWLISTED: 'allowlisted'>
    """

    def __init__(self, inputs: NoticeInputs | None = None) -> None:
        self._inputs = inputs or NoticeInputs()
        self._decision = decide(self._inputs)

    @property
    def inputs(self) -> NoticeInputs:
        return self._inputs

    @property
    def decision(self) -> NoticeDecision:
        return self._decision

    @property
    def outcome(self) -> PolicyOutcome:
        return self._decision.outcome

    @property
    def ticket_link(self) -> str:
        return self._decision.ticket_link

    @property
    def actions(self) -> ActionSet:
        return self._decision.actions

    def update(self, **changes: Any) -> NoticeDecision:
        """Replace some inputs and recompute. Unchanged inputs skip the work."""
        inputs = replace(self._inputs, **changes)
        if inputs != self._inputs:
            self._inputs = inputs
            self._decision = decide(inputs)
        return self._decision
