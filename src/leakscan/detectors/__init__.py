"""Pattern rules and the rule registry for leakscan."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Pattern, Tuple

from leakscan.core.exceptions import ConfigError
from leakscan.core.findings import Severity
from leakscan.detectors.patterns import DEFAULT_RULES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """A named regex with the severity assigned to its matches."""

    name: str
    regex: Pattern[str]
    default_severity: Severity
    description: str = ""

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    def secret_value(self, match: "re.Match[str]") -> Tuple[str, int]:
        """Return the secret part of *match* and its start offset.

        Group 1 holds the secret when the rule defines one; otherwise the
        whole match is the secret.
        """
        if self.regex.groups and match.group(1) is not None:
            return match.group(1), match.start(1)
        return match.group(0), match.start()

    @classmethod
    def from_dict(cls, spec: Mapping[str, Any], source: Optional[str] = None) -> "PatternRule":
        name = spec.get("name")
        pattern = spec.get("pattern")
        if not name or not isinstance(name, str):
            raise ConfigError("Rule is missing a 'name'", config_path=source, section="rules")
        if not pattern or not isinstance(pattern, str):
            raise ConfigError(f"Rule {name!r} is missing a 'pattern'", config_path=source, section="rules")
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise ConfigError(
                f"Rule {name!r} has an invalid pattern: {e}", config_path=source, section="rules"
            ) from e
        try:
            severity = Severity.parse(spec.get("severity", "MEDIUM"))
        except ValueError as e:
            raise ConfigError(f"Rule {name!r}: {e}", config_path=source, section="rules") from e
        return cls(
            name=name,
            regex=regex,
            default_severity=severity,
            description=str(spec.get("description") or name),
        )


class RuleRegistry:
    """Ordered, read-only collection of pattern rules."""

    def __init__(self, rules: Iterable[PatternRule]):
        ordered: List[PatternRule] = []
        seen = set()
        for rule in rules:
            if rule.name in seen:
                raise ConfigError(f"Duplicate rule name: {rule.name}", section="rules")
            seen.add(rule.name)
            ordered.append(rule)
        self._rules: Tuple[PatternRule, ...] = tuple(ordered)
        self._index: Dict[str, int] = {r.name: i for i, r in enumerate(self._rules)}

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    @property
    def rules(self) -> Tuple[PatternRule, ...]:
        return self._rules

    def names(self) -> List[str]:
        return [r.name for r in self._rules]

    def get(self, name: str) -> PatternRule:
        return self._rules[self._index[name]]

    @classmethod
    def from_specs(cls, specs: Iterable[Mapping[str, Any]], source: Optional[str] = None) -> "RuleRegistry":
        return cls(PatternRule.from_dict(spec, source) for spec in specs)

    def with_config(self, config: Mapping[str, Any], source: Optional[str] = None) -> "RuleRegistry":
        """Return a new registry with the config's disabled rules removed
        and its custom rules appended. ``self`` is left untouched."""
        disabled = set(config.get("disabled_rules") or [])
        unknown = disabled - set(self._index)
        for name in sorted(unknown):
            logger.warning("disabled_rules names an unknown rule: %s", name)
        kept = [r for r in self._rules if r.name not in disabled]
        custom = [PatternRule.from_dict(spec, source) for spec in config.get("rules") or []]
        return RuleRegistry(kept + custom)


# Built once on first use, then shared read-only.
_default_registry: Optional[RuleRegistry] = None


def get_default_registry() -> RuleRegistry:
    """Get the built-in rule registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = RuleRegistry.from_specs(DEFAULT_RULES)
    return _default_registry


def build_registry(config: Optional[Mapping[str, Any]] = None, source: Optional[str] = None) -> RuleRegistry:
    """Registry for a scan: the defaults adjusted by *config*."""
    registry = get_default_registry()
    if not config:
        return registry
    return registry.with_config(config, source)


__all__ = [
    "PatternRule",
    "RuleRegistry",
    "build_registry",
    "get_default_registry",
]
