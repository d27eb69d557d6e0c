"""gateway-notice: block page and follow-up actions for gateway-blocked requests."""

__version__ = "1.0.0"
