"""
Notice API routes.

Endpoint:
- GET /api/notice - Decision for the block described by the query string
"""

from typing import List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from gateway_notice.config import Settings
from gateway_notice.connector.gateway_api import GatewayApiClient
from gateway_notice.pipeline import NoticeView, load_notice

router = APIRouter()


class ActionInfo(BaseModel):
    """A follow-up link offered to the user."""
    kind: str
    label: str
    href: str


class NoticeResponse(BaseModel):
    """Decision and context for one blocked request."""
    context: dict[str, str]
    domain: str
    outcome: str
    ticket_link: str
    actions: List[ActionInfo]
    note: Optional[str]
    rule_description: str
    categories: List[str]
    error: Optional[str]


async def notice_for_request(request: Request) -> NoticeView:
    """Run the notice pipeline for an incoming request.

    The user's cookies are forwarded so the collaborator services see the
    same session as the browser.
    """
    settings: Settings = request.app.state.settings
    api = GatewayApiClient(
        settings,
        transport=request.app.state.transport,
        cookie_header=request.headers.get("cookie"),
    )
    async with api:
        return await load_notice(request.query_params.multi_items(), settings, api)


@router.get("/notice", response_model=NoticeResponse)
async def get_notice(request: Request) -> NoticeResponse:
    """Classify the block and return the actions the page would render."""
    view = await notice_for_request(request)
    decision = view.decision

    return NoticeResponse(
        context=dict(view.context.raw),
        domain=decision.domain,
        outcome=decision.outcome.value,
        ticket_link=decision.ticket_link,
        actions=[
            ActionInfo(kind=a.kind.value, label=a.label, href=a.href)
            for a in decision.actions.actions
        ],
        note=decision.actions.note,
        rule_description=view.rule_description,
        categories=list(view.context.request_categories) if view.show_categories else [],
        error=view.error,
    )
