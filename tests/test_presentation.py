"""Tests for the presentation selector."""

from gateway_notice.engine.presentation import (
    EXCLUDED_NOTE,
    ActionKind,
    select_actions,
)
from gateway_notice.model.policy import PolicyOutcome

PORTAL = "https://radar.cloudflare.com/domains"
LINK = "https://tickets.example.net/create?pid=12345"


def test_excluded_offers_nothing():
    actions = select_actions(PolicyOutcome.EXCLUDED, LINK, "evil.test", PORTAL)
    assert not actions
    assert actions.note == EXCLUDED_NOTE


def test_allowlisted_offers_intel_portal_only():
    actions = select_actions(PolicyOutcome.ALLOWLISTED, LINK, "bad.example.com", PORTAL)

    assert actions.kinds == (ActionKind.INTEL_VIEW, ActionKind.INTEL_RECATEGORIZE)
    assert actions.actions[0].href == f"{PORTAL}/domain/bad.example.com"
    assert actions.actions[1].href == f"{PORTAL}/feedback/bad.example.com"
    assert ActionKind.TICKET not in actions.kinds


def test_allowlisted_without_domain_has_no_links():
    actions = select_actions(PolicyOutcome.ALLOWLISTED, LINK, "", PORTAL)
    assert actions.actions == ()


def test_portal_trailing_slash():
    actions = select_actions(PolicyOutcome.ALLOWLISTED, "", "a.test", PORTAL + "/")
    assert actions.actions[0].href == f"{PORTAL}/domain/a.test"


def test_default_offers_ticket_when_link_exists():
    actions = select_actions(PolicyOutcome.DEFAULT, LINK, "", PORTAL)
    assert actions.kinds == (ActionKind.TICKET,)
    assert actions.actions[0].href == LINK


def test_default_without_link_offers_nothing():
    actions = select_actions(PolicyOutcome.DEFAULT, "", "evil.test", PORTAL)
    assert not actions
    assert actions.note is None
