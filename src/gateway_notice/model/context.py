"""BlockContext - What the gateway told us about the blocked request.

The gateway redirects the user to the notice page with a handful of
``cf_*`` query parameters. Every value is untrusted text and is stored
verbatim; nothing here validates or rejects input.
"""

import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

RULE_ID_KEY = "cf_rule_id"
SITE_URI_KEY = "cf_site_uri"
FILTER_KEY = "cf_filter"
ACCOUNT_ID_KEY = "cf_account_id"
USER_EMAIL_KEY = "cf_user_email"
CATEGORIES_KEY = "cf_request_category_names"

_CATEGORY_SPLIT = re.compile(r"[;,]")


@dataclass(frozen=True)
class BlockContext:
    """Immutable record of the block, built once per page load.

    Attributes:
        rule_id: Gateway policy that caused the block.
        site_uri: URI the user tried to reach.
        filter: Gateway filter type (http, dns, av, l4).
        account_id: Gateway account identifier.
        user_email: Identity of the blocked user.
        request_categories: Categories the gateway matched, in order.
        raw: Every query parameter received, including unknown keys.
    """

    rule_id: str | None = None
    site_uri: str | None = None
    filter: str | None = None
    account_id: str | None = None
    user_email: str | None = None
    request_categories: tuple[str, ...] = ()
    raw: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_empty(self) -> bool:
        """True when the gateway passed no parameters at all."""
        return not self.raw

    def to_json(self) -> str:
        """Pretty-printed raw context, as shown in the Redirect Context panel."""
        return json.dumps(dict(self.raw), indent=2, ensure_ascii=False)


def extract_context(params: Mapping[str, str] | Iterable[tuple[str, str]]) -> BlockContext:
    """Build a BlockContext from request query parameters.

    Keys match case-sensitively. When a key repeats, the last value wins.
    Unknown keys are only kept in ``raw``.
    """
    items = params.items() if isinstance(params, Mapping) else params
    raw: dict[str, str] = {}
    for key, value in items:
        raw[key] = value

    return BlockContext(
        rule_id=raw.get(RULE_ID_KEY),
        site_uri=raw.get(SITE_URI_KEY),
        filter=raw.get(FILTER_KEY),
        account_id=raw.get(ACCOUNT_ID_KEY),
        user_email=raw.get(USER_EMAIL_KEY),
        request_categories=parse_categories(raw.get(CATEGORIES_KEY)),
        raw=MappingProxyType(raw),
    )


def parse_categories(value: Any) -> tuple[str, ...]:
    """Parse the category list the gateway sends.

    Accepts a JSON array string or a ``,``/``;`` separated string.
    """
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if v)
    if not isinstance(value, str) or not value:
        return ()

    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = None

    if isinstance(parsed, list):
        return tuple(str(v) for v in parsed if v)

    parts = (p.strip() for p in _CATEGORY_SPLIT.split(value))
    return tuple(p for p in parts if p)
