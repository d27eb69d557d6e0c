"""Ticket link builder - Deep link into the ticket system for a block.

The link pre-fills a recategorisation ticket with a summary and a
description built from the block context. The domain is obfuscated in the
summary so ticket titles never auto-link to the blocked site.

Public API:
    build_ticket_link(context, base_url) -> str
    resolve_domain(site_uri) -> str
"""

import logging
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from gateway_notice.errors import UriParseError
from gateway_notice.model.context import BlockContext

logger = logging.getLogger(__name__)

UNKNOWN = "(unknown)"

TICKET_PROJECT_ID = "12345"   # BUGS project
TICKET_ISSUE_TYPE = "1"       # Bug
TICKET_PRIORITY = "45678"     # P4 Normal

SUMMARY_PREFIX = "Internal Gateway Block Categorisation: "
DESCRIPTION_PREAMBLE = "*Context information from Zero Security Corp Gateway block page:*"
FILTER_HINT = "(http|dns|av|l4)"


def parse_absolute_uri(value: str | None) -> SplitResult:
    """Split ``value`` into URI parts, requiring a scheme and an authority.

    Raises:
        UriParseError: If the value is empty, malformed, or relative.
    """
    if not value:
        raise UriParseError(value)
    try:
        parts = urlsplit(value.strip())
    except ValueError as e:
        raise UriParseError(value) from e
    if not parts.scheme or not parts.netloc:
        raise UriParseError(value)
    return parts


def parse_hostname(site_uri: str | None) -> str:
    """Return the lowercase hostname of ``site_uri``.

    Raises:
        UriParseError: If the URI has no usable host.
    """
    parts = parse_absolute_uri(site_uri)
    try:
        hostname = parts.hostname
    except ValueError as e:
        raise UriParseError(site_uri) from e
    if not hostname:
        raise UriParseError(site_uri)
    return hostname


def resolve_domain(site_uri: str | None) -> str:
    """Hostname of the blocked site, or ``""`` when it cannot be parsed."""
    try:
        return parse_hostname(site_uri)
    except UriParseError:
        logger.debug("Invalid cf_site_uri: %r", site_uri)
        return ""


def obfuscate_domain(hostname: str) -> str:
    """Defang a hostname: ``evil.test`` -> ``evil[.]test``."""
    if not hostname:
        return UNKNOWN
    return hostname.replace(".", "[.]")


def build_summary(hostname: str) -> str:
    return SUMMARY_PREFIX + obfuscate_domain(hostname)


def build_description(context: BlockContext, hostname: str) -> str:
    """Multi-line ticket description. Missing fields read ``(unknown)``."""
    lines = [
        DESCRIPTION_PREAMBLE,
        "",
        f"*Domain*: {hostname or UNKNOWN}",
        f"*Rule ID*: {context.rule_id or UNKNOWN}",
        f"*Filter*: {context.filter or UNKNOWN}  {FILTER_HINT}",
        f"*Account ID*: {context.account_id or UNKNOWN}",
        f"*User Email*: {context.user_email or UNKNOWN}",
    ]
    return "\n".join(lines)


def set_query_params(url: str, updates: list[tuple[str, str]]) -> str:
    """Set query parameters on an absolute URL.

    A key that already exists is replaced at its first position and later
    duplicates are dropped. Other parameters and the fragment are kept.

    Raises:
        UriParseError: If ``url`` is not an absolute URI.
    """
    parts = parse_absolute_uri(url)
    pending = dict(updates)
    placed: set[str] = set()
    merged: list[tuple[str, str]] = []

    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key not in pending:
            merged.append((key, value))
        elif key not in placed:
            merged.append((key, pending[key]))
            placed.add(key)

    merged.extend((key, value) for key, value in updates if key not in placed)

    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path or "/", urlencode(merged), parts.fragment)
    )


def build_ticket_link(context: BlockContext, base_url: str | None) -> str:
    """Build the ticket-creation URL for a block.

    Returns an empty string when ``base_url`` is not an absolute URI.
    Identical inputs always produce identical output.
    """
    hostname = resolve_domain(context.site_uri)
    params = [
        ("pid", TICKET_PROJECT_ID),
        ("issuetype", TICKET_ISSUE_TYPE),
        ("priority", TICKET_PRIORITY),
        ("summary", build_summary(hostname)),
        ("description", build_description(context, hostname)),
    ]

    try:
        return set_query_params(base_url or "", params)
    except UriParseError:
        logger.debug("Ticket base URL is not usable: %r", base_url)
        return ""
