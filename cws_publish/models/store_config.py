# cws_publish/models/store_config.py
"""Store config models"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any

from ..constants import DESKTOP_RULESET_MARKER, RULESET_PROVIDER_KEY
from .item import lookup_field


def _string_mapping(value: Any, section: str) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{section}' must be an object")
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise ValueError(f"'{section}' must map strings to strings")
    return dict(value)


@dataclass
class Manifest:
    """Store config manifest (manifest.json)"""
    name: str = ''
    providers: Dict[str, str] = field(default_factory=dict)
    rule_sets: Dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Nothing to resolve"""
        return not self.providers and not self.rule_sets

    def desktop_ruleset(self) -> Optional[str]:
        """Get the ruleset path for the desktop variant

        Picks the lexicographically smallest key containing the desktop
        marker.

        Returns:
            Relative ruleset path or None
        """
        keys = sorted(k for k in self.rule_sets if DESKTOP_RULESET_MARKER in k)
        if not keys:
            return None
        return self.rule_sets[keys[0]]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Manifest':
        """Create from parsed JSON

        Raises:
            ValueError: If the document shape is invalid
        """
        if not isinstance(data, dict):
            raise ValueError("manifest must be a JSON object")

        name = lookup_field(data, 'name') or ''
        return cls(
            name=str(name),
            providers=_string_mapping(lookup_field(data, 'providers'), 'providers'),
            rule_sets=_string_mapping(lookup_field(data, 'rulesets'), 'rulesets')
        )


@dataclass
class RuleSet:
    """Ruleset file naming the external provider to load"""
    provider_name: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RuleSet':
        """Create from parsed YAML

        Raises:
            ValueError: If the document is not a mapping or the provider
                name is not a plain file name
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("ruleset must be a YAML mapping")

        provider = data.get(RULESET_PROVIDER_KEY)
        provider_name = '' if provider is None else str(provider)
        if any(sep in provider_name for sep in ('/', '\\')) or provider_name in ('.', '..'):
            raise ValueError(f"invalid provider name {provider_name!r}")
        return cls(provider_name=provider_name)
