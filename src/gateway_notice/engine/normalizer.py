"""List normalizer - Policy-id config values to PolicyIdSet."""

from gateway_notice.model.policy import ConfigValue, PolicyIdSet, ValueKind


def normalize(value: ConfigValue) -> PolicyIdSet:
    """Turn a tagged config value into a set of trimmed, non-empty rule ids.

    Non-string list entries are ignored. First occurrence wins for ordering.
    """
    if value.kind is ValueKind.LIST:
        entries = [item for item in value.items if isinstance(item, str)]
    elif value.kind is ValueKind.DELIMITED:
        entries = value.text.split(",")
    else:
        return PolicyIdSet()

    ids: dict[str, None] = {}
    for entry in entries:
        rule_id = entry.strip()
        if rule_id:
            ids.setdefault(rule_id, None)
    return PolicyIdSet(tuple(ids))


def normalize_raw(raw: object) -> PolicyIdSet:
    """Shortcut for ``normalize(ConfigValue.from_raw(raw))``."""
    return normalize(ConfigValue.from_raw(raw))
