"""
Data models for the gardenctl configuration.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


def _to_str(value: Any) -> str:
    """Read a YAML scalar as a string, None being empty."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


@dataclass
class Garden:
    """Represents one garden cluster."""
    name: str
    identity: str = ''
    context: str = ''  # overrides the current-context of the kubeconfig
    kubeconfig: str = ''
    aliases: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Garden":
        return cls(
            name=_to_str(data.get('name')),
            identity=_to_str(data.get('identity')),
            context=_to_str(data.get('context')),
            kubeconfig=_to_str(data.get('kubeconfig')),
            aliases=[_to_str(a) for a in data.get('aliases') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'identity': self.identity,
            'context': self.context,
            'kubeconfig': self.kubeconfig,
            'aliases': list(self.aliases),
        }


@dataclass
class Config:
    """The gardenctl configuration document."""
    gardens: List[Garden] = field(default_factory=list)
    # Regular expressions with named groups (garden, project, namespace, shoot),
    # evaluated in order
    match_patterns: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        return cls(
            gardens=[Garden.from_dict(g) for g in data.get('gardens') or []],
            match_patterns=[_to_str(p) for p in data.get('matchPatterns') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gardens': [g.to_dict() for g in self.gardens],
            'matchPatterns': list(self.match_patterns),
        }


@dataclass
class PatternMatch:
    """Target values extracted from a string by a match pattern."""
    garden: str = ''
    project: str = ''
    namespace: str = ''  # can be used to find the related project
    shoot: str = ''

    def to_dict(self) -> Dict[str, str]:
        """Return only the populated fields."""
        values = {
            'garden': self.garden,
            'project': self.project,
            'namespace': self.namespace,
            'shoot': self.shoot,
        }
        return {k: v for k, v in values.items() if v}
