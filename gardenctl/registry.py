"""The registry of known Garden clusters."""
from typing import List, Mapping, Optional

from gardenctl import store
from gardenctl.errors import DuplicateNameError, NotFoundError, ValidationError
from gardenctl.matcher import match_pattern
from gardenctl.models import Config, Garden, PatternMatch
from gardenctl.utils import remove_duplicates, split_lines

# Keys read from the downloaded cluster config
CLUSTER_CONFIG_ALIASES = "aliases"
CLUSTER_CONFIG_IDENTITY = "identity"
CLUSTER_CONFIG_MATCH_PATTERNS = "global.matchPatterns"


class GardenRegistry:
    """Lookups and updates on a gardenctl configuration.

    Every mutating operation writes the whole configuration to its
    destination file afterwards. If that write fails the in-memory
    configuration keeps the change.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()

    @classmethod
    def load(cls, filename: str) -> "GardenRegistry":
        return cls(store.load_from_file(filename))

    def save(self, filename: str) -> None:
        store.save_to_file(filename, self.config)

    @property
    def gardens(self) -> List[Garden]:
        return self.config.gardens

    def find_garden(self, name: str) -> Optional[Garden]:
        for garden in self.config.gardens:
            if garden.name == name:
                return garden
        return None

    def garden_name(self, name_or_alias: str) -> str:
        """Return the name of the Garden called name_or_alias.

        An exact name wins over an alias. Otherwise the first Garden listing
        name_or_alias among its aliases is used.
        """
        garden = self.find_garden(name_or_alias)
        if garden is not None:
            return garden.name

        for garden in self.config.gardens:
            if name_or_alias in garden.aliases:
                return garden.name

        raise NotFoundError(name_or_alias)

    def match_pattern(self, value: str) -> PatternMatch:
        return match_pattern(self.config.match_patterns, value)

    def add_garden(
        self,
        name: str,
        kubeconfig: str,
        context: str,
        cluster_config: Optional[Mapping[str, str]],
        filename: str,
    ) -> Garden:
        """Add a new Garden, taking aliases, identity and match patterns from cluster_config."""
        if self.find_garden(name) is not None:
            raise DuplicateNameError(name)

        data = cluster_config or {}

        garden = Garden(
            name=name,
            identity=data.get(CLUSTER_CONFIG_IDENTITY, ""),
            context=context,
            kubeconfig=kubeconfig,
            aliases=remove_duplicates(split_lines(data.get(CLUSTER_CONFIG_ALIASES, ""))),
        )
        self.config.gardens.append(garden)

        patterns = split_lines(data.get(CLUSTER_CONFIG_MATCH_PATTERNS, ""))
        self.config.match_patterns = remove_duplicates(self.config.match_patterns + patterns)

        self.save(filename)
        return garden

    def set_garden(
        self,
        name: str,
        filename: str,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        identity: Optional[str] = None,
        aliases: Optional[List[str]] = None,
    ) -> Garden:
        """Update the Garden called name, or add it if there is none.

        Only arguments that are not None are applied. An empty string or an
        empty list is a value and clears the field.
        """
        if not name:
            raise ValidationError("garden name is required")

        garden = self.find_garden(name)
        if garden is None:
            garden = Garden(name=name)
            self.config.gardens.append(garden)

        if kubeconfig is not None:
            garden.kubeconfig = kubeconfig
        if context is not None:
            garden.context = context
        if identity is not None:
            garden.identity = identity
        if aliases is not None:
            garden.aliases = list(aliases)

        self.save(filename)
        return garden
