"""Policy classifier - Decide which follow-up a blocking rule allows."""

from gateway_notice.model.policy import PolicyIdSet, PolicyOutcome


def classify(
    rule_id: str | None,
    allowlist: PolicyIdSet,
    exclusions: PolicyIdSet,
) -> PolicyOutcome:
    """Classify a rule id. Exclusion always wins over the allowlist.

    An absent or empty rule id is never excluded nor allowlisted.
    """
    if rule_id and rule_id in exclusions:
        return PolicyOutcome.EXCLUDED
    if rule_id and rule_id in allowlist:
        return PolicyOutcome.ALLOWLISTED
    return PolicyOutcome.DEFAULT
