"""Engine package - Policy decisions for the notice page."""

from gateway_notice.engine.classifier import classify
from gateway_notice.engine.normalizer import normalize, normalize_raw
from gateway_notice.engine.presentation import ActionKind, ActionSet, NoticeAction, select_actions
from gateway_notice.engine.state import NoticeDecision, NoticeInputs, NoticeState, decide
from gateway_notice.engine.ticket_link import build_ticket_link, obfuscate_domain, resolve_domain

__all__ = [
    "ActionKind",
    "ActionSet",
    "NoticeAction",
    "NoticeDecision",
    "NoticeInputs",
    "NoticeState",
    "build_ticket_link",
    "classify",
    "decide",
    "normalize",
    "normalize_raw",
    "obfuscate_domain",
    "resolve_domain",
    "select_actions",
]
