"""Presentation selector - Map a policy outcome to the actions on the page."""

from dataclasses import dataclass
from enum import Enum

from gateway_notice.model.policy import PolicyOutcome

EXCLUDED_NOTE = "No actions are available for this block."


class ActionKind(Enum):
    """Follow-up actions the notice page can offer."""

    INTEL_VIEW = "intel_view"
    INTEL_RECATEGORIZE = "intel_recategorize"
    TICKET = "ticket"


@dataclass(frozen=True)
class NoticeAction:
    """A single outbound link rendered as a button."""

    kind: ActionKind
    label: str
    href: str


@dataclass(frozen=True)
class ActionSet:
    """Actions to render, plus an optional note shown instead of them."""

    actions: tuple[NoticeAction, ...] = ()
    note: str | None = None

    @property
    def kinds(self) -> tuple[ActionKind, ...]:
        return tuple(action.kind for action in self.actions)

    def __bool__(self) -> bool:
        return bool(self.actions)


def intel_portal_actions(domain: str, portal_url: str) -> tuple[NoticeAction, ...]:
    """Intel-portal links for a domain. Empty when the domain is unknown."""
    if not domain:
        return ()
    base = portal_url.rstrip("/")
    return (
        NoticeAction(ActionKind.INTEL_VIEW, "View in Radar", f"{base}/domain/{domain}"),
        NoticeAction(
            ActionKind.INTEL_RECATEGORIZE,
            "Submit Recategorization Request",
            f"{base}/feedback/{domain}",
        ),
    )


def select_actions(
    outcome: PolicyOutcome,
    ticket_link: str,
    domain: str,
    portal_url: str,
) -> ActionSet:
    """Decide which actions to render.

    EXCLUDED never offers anything, ALLOWLISTED never offers the ticket,
    DEFAULT offers the ticket only when a link could be built.
    """
    if outcome is PolicyOutcome.EXCLUDED:
        return ActionSet(note=EXCLUDED_NOTE)

    if outcome is PolicyOutcome.ALLOWLISTED:
        return ActionSet(actions=intel_portal_actions(domain, portal_url))

    if ticket_link:
        return ActionSet(
            actions=(NoticeAction(ActionKind.TICKET, "Submit Bugs Ticket", ticket_link),)
        )
    return ActionSet()
