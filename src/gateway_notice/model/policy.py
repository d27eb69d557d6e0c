"""Policy data structures - config values, id sets and outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class ValueKind(Enum):
    """Shape of a loosely typed policy-id config value."""

    ABSENT = "absent"
    LIST = "list"
    DELIMITED = "delimited"


@dataclass(frozen=True)
class ConfigValue:
    """Tagged policy-id config value.

    The environment service and the YAML config both send policy ids either
    as a JSON array or as one comma-separated string. ``from_raw`` tags the
    value once so the normalizer never inspects types itself.
    """

    kind: ValueKind
    items: tuple[Any, ...] = ()
    text: str = ""

    @classmethod
    def absent(cls) -> "ConfigValue":
        return cls(ValueKind.ABSENT)

    @classmethod
    def of_list(cls, items: list[Any] | tuple[Any, ...]) -> "ConfigValue":
        return cls(ValueKind.LIST, items=tuple(items))

    @classmethod
    def delimited(cls, text: str) -> "ConfigValue":
        return cls(ValueKind.DELIMITED, text=text)

    @classmethod
    def from_raw(cls, raw: Any) -> "ConfigValue":
        """Tag a raw JSON/YAML value. Empty strings and other types are absent."""
        if isinstance(raw, (list, tuple)):
            return cls.of_list(raw)
        if isinstance(raw, str) and raw:
            return cls.delimited(raw)
        return cls.absent()

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT


@dataclass(frozen=True)
class PolicyIdSet:
    """Set of rule ids. Keeps first-seen order for display."""

    ids: tuple[str, ...] = ()

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self.ids

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def to_list(self) -> list[str]:
        return list(self.ids)


class PolicyOutcome(Enum):
    """Which follow-up the notice page may offer for a rule."""

    EXCLUDED = "excluded"        # No action of any kind
    ALLOWLISTED = "allowlisted"  # Intel-portal actions
    DEFAULT = "default"          # Ticket action, when a link exists
