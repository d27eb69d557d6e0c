"""Tests for recomputation of decisions when inputs change."""

from urllib.parse import parse_qs, urlsplit

from gateway_notice.engine.presentation import ActionKind
from gateway_notice.engine.state import NoticeInputs, NoticeState
from gateway_notice.model.context import extract_context
from gateway_notice.model.policy import PolicyIdSet, PolicyOutcome

TICKETS = "https://tickets.example.net/create"


class TestScenarios:
    """End-to-end decisions for representative blocks."""

    def test_allowlisted_rule_shows_intel_actions(self):
        state = NoticeState(NoticeInputs(
            context=extract_context({"cf_rule_id": "4-5-6", "cf_site_uri": "https://bad.example.com"}),
            allowlist=PolicyIdSet(("1-2-3", "4-5-6", "7-8-9")),
            ticket_base_url=TICKETS,
        ))

        assert state.outcome is PolicyOutcome.ALLOWLISTED
        assert state.actions.kinds == (ActionKind.INTEL_VIEW, ActionKind.INTEL_RECATEGORIZE)

    def test_excluded_rule_shows_nothing(self):
        state = NoticeState(NoticeInputs(
            context=extract_context({"cf_rule_id": "zzz"}),
            exclusions=PolicyIdSet(("zzz",)),
            ticket_base_url=TICKETS,
        ))

        assert state.outcome is PolicyOutcome.EXCLUDED
        assert state.actions.actions == ()

    def test_default_rule_gets_ticket(self):
        state = NoticeState(NoticeInputs(
            context=extract_context({
                "cf_rule_id": "qqq",
                "cf_site_uri": "https://evil.test",
                "cf_filter": "dns",
            }),
            allowlist=PolicyIdSet(("4-5-6",)),
            ticket_base_url=TICKETS,
        ))

        assert state.outcome is PolicyOutcome.DEFAULT
        assert state.ticket_link
        summary = parse_qs(urlsplit(state.ticket_link).query)["summary"][0]
        assert "evil[.]test" in summary
        assert state.actions.kinds == (ActionKind.TICKET,)

    def test_malformed_site_uri(self):
        state = NoticeState(NoticeInputs(
            context=extract_context({"cf_rule_id": "qqq", "cf_site_uri": ""}),
            ticket_base_url=TICKETS,
        ))

        description = parse_qs(urlsplit(state.ticket_link).query)["description"][0]
        assert "*Domain*: (unknown)" in description
        assert state.decision.domain == ""


class TestUpdate:
    """Derived values follow every input change."""

    def test_adding_exclusion_hides_ticket(self):
        state = NoticeState(NoticeInputs(
            context=extract_context({"cf_rule_id": "qqq", "cf_site_uri": "https://evil.test"}),
            ticket_base_url=TICKETS,
        ))
        assert state.actions.kinds == (ActionKind.TICKET,)

        state.update(exclusions=PolicyIdSet(("qqq",)))

        assert state.outcome is PolicyOutcome.EXCLUDED
        assert state.actions.actions == ()

    def test_changing_base_url_rebuilds_link(self):
        state = NoticeState(NoticeInputs(context=extract_context({"cf_rule_id": "qqq"})))
        assert state.ticket_link == ""
        assert state.actions.actions == ()

        state.update(ticket_base_url=TICKETS)

        assert state.ticket_link.startswith(TICKETS + "?")
        assert state.actions.kinds == (ActionKind.TICKET,)

    def test_changing_context_reclassifies(self):
        state = NoticeState(NoticeInputs(allowlist=PolicyIdSet(("4-5-6",))))
        assert state.outcome is PolicyOutcome.DEFAULT

        decision = state.update(context=extract_context({"cf_rule_id": "4-5-6"}))

        assert decision.outcome is PolicyOutcome.ALLOWLISTED
        assert state.inputs.context.rule_id == "4-5-6"

    def test_noop_update_keeps_decision(self):
        state = NoticeState(NoticeInputs(ticket_base_url=TICKETS))
        before = state.decision
        state.update(ticket_base_url=TICKETS)
        assert state.decision is before
