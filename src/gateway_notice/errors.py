"""Exception hierarchy for gateway-notice.

Fetch errors are raised by the gateway API connector and caught at the
initialization boundary in ``pipeline.load_notice``. ``UriParseError`` never
leaves the engine; it is recovered where a URI is parsed.
"""


class GatewayNoticeError(Exception):
    """Base class for all gateway-notice errors."""


class ConfigFetchError(GatewayNoticeError):
    """Environment service unreachable, non-OK, or returned a malformed payload."""


class RuleFetchError(GatewayNoticeError):
    """Rule-metadata service unreachable, non-OK, or returned a malformed payload."""

    def __init__(self, message: str, rule_id: str | None = None) -> None:
        super().__init__(message)
        self.rule_id = rule_id


class UriParseError(GatewayNoticeError, ValueError):
    """A site URI or ticket base URL could not be parsed as an absolute URI."""

    def __init__(self, value: str | None) -> None:
        super().__init__(f"Not an absolute URI: {value!r}")
        self.value = value
