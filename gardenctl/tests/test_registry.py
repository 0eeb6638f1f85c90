import copy

import pytest

from gardenctl import store
from gardenctl.errors import (
    DuplicateNameError, NoMatchError, NotFoundError, StorageWriteError, ValidationError
)
from gardenctl.models import Config, Garden, PatternMatch
from gardenctl.registry import GardenRegistry


@pytest.fixture
def config_file(tmp_path):
    return str(tmp_path / "gardenctl-v2.yaml")


@pytest.fixture
def registry():
    return GardenRegistry(Config(
        gardens=[
            Garden(name="main", kubeconfig="/main.yaml", aliases=["x", "m"]),
            Garden(name="other", kubeconfig="/other.yaml", aliases=["o"]),
        ],
    ))


def test_garden_name_by_name(registry):
    assert registry.garden_name("main") == "main"
    assert registry.garden_name("other") == "other"


def test_garden_name_by_alias(registry):
    assert registry.garden_name("x") == "main"
    assert registry.garden_name("o") == "other"


def test_garden_name_first_entry_wins():
    registry = GardenRegistry(Config(gardens=[
        Garden(name="a", aliases=["shared"]),
        Garden(name="b", aliases=["shared"]),
    ]))
    assert registry.garden_name("shared") == "a"


def test_garden_name_not_found(registry):
    before = copy.deepcopy(registry.config)
    with pytest.raises(NotFoundError) as exc:
        registry.garden_name("unknown")
    assert exc.value.name == "unknown"
    assert registry.config == before


def test_add_garden(config_file):
    registry = GardenRegistry()
    cluster_config = {
        "aliases": "dev\nd\n",
        "identity": "landscape-dev",
        "global.matchPatterns": "^(?P<garden>[a-z]+)$\n",
        "unrelated": "ignored",
    }

    registry.add_garden("landscape-dev", "/kube/dev.yaml", "", cluster_config, config_file)

    expected = Garden(
        name="landscape-dev",
        identity="landscape-dev",
        context="",
        kubeconfig="/kube/dev.yaml",
        aliases=["dev", "d"],
    )
    assert registry.gardens == [expected]
    assert registry.config.match_patterns == ["^(?P<garden>[a-z]+)$"]
    assert store.load_from_file(config_file) == registry.config


def test_add_garden_without_cluster_config(config_file):
    registry = GardenRegistry()
    registry.add_garden("a", "/a.yaml", "ctx", None, config_file)

    assert registry.gardens == [Garden(name="a", context="ctx", kubeconfig="/a.yaml")]
    assert registry.config.match_patterns == []


def test_add_garden_duplicate(registry, config_file):
    before = copy.deepcopy(registry.gardens)

    with pytest.raises(DuplicateNameError):
        registry.add_garden("main", "/new.yaml", "", {"aliases": "n"}, config_file)

    assert registry.gardens == before
    assert store.load_from_file(config_file) == Config()


def test_add_garden_deduplicates_match_patterns(config_file):
    registry = GardenRegistry()
    registry.add_garden("a", "/a.yaml", "", {"global.matchPatterns": "p1\np2"}, config_file)
    registry.add_garden("b", "/b.yaml", "", {"global.matchPatterns": "p1\np2"}, config_file)

    assert registry.config.match_patterns == ["p1", "p2"]
    assert store.load_from_file(config_file).match_patterns == ["p1", "p2"]


def test_add_garden_keeps_existing_pattern_order(config_file):
    registry = GardenRegistry(Config(match_patterns=["p2", "p0"]))
    registry.add_garden("a", "/a.yaml", "", {"global.matchPatterns": "p1\np2\np3\n"}, config_file)

    assert registry.config.match_patterns == ["p2", "p0", "p1", "p3"]


def test_add_garden_save_failure_keeps_memory(tmp_path):
    registry = GardenRegistry()
    with pytest.raises(StorageWriteError):
        registry.add_garden("a", "/a.yaml", "", None, str(tmp_path))

    assert [g.name for g in registry.gardens] == ["a"]


def test_set_garden_creates(config_file):
    registry = GardenRegistry()
    registry.set_garden("new", config_file, kubeconfig="/new.yaml", aliases=["n"])

    assert registry.gardens == [Garden(name="new", kubeconfig="/new.yaml", aliases=["n"])]
    assert store.load_from_file(config_file) == registry.config


def test_set_garden_updates_only_given_fields(registry, config_file):
    registry.set_garden("main", config_file, context="admin", identity="")

    main = registry.find_garden("main")
    assert main == Garden(name="main", context="admin", identity="", kubeconfig="/main.yaml", aliases=["x", "m"])
    assert len(registry.gardens) == 2


def test_set_garden_explicit_empty_values(registry, config_file):
    registry.set_garden("main", config_file, kubeconfig="", aliases=[])

    main = registry.find_garden("main")
    assert main.kubeconfig == ""
    assert main.aliases == []


def test_set_garden_requires_name(registry, config_file):
    before = copy.deepcopy(registry.config)
    with pytest.raises(ValidationError):
        registry.set_garden("", config_file, kubeconfig="/x.yaml")
    assert registry.config == before


def test_match_pattern_uses_config(config_file):
    registry = GardenRegistry(Config(match_patterns=["^(?P<garden>[a-z]+)/(?P<shoot>[a-z]+)$"]))
    assert registry.match_pattern("dev/cluster") == PatternMatch(garden="dev", shoot="cluster")
    with pytest.raises(NoMatchError):
        registry.match_pattern("nothing")


def test_load_and_save(config_file):
    GardenRegistry(Config(gardens=[Garden(name="a")])).save(config_file)
    assert [g.name for g in GardenRegistry.load(config_file).gardens] == ["a"]


def test_garden_name_prefers_name_over_earlier_alias():
    registry = GardenRegistry(Config(gardens=[
        Garden(name="a", aliases=["b"]),
        Garden(name="b"),
    ]))
    assert registry.garden_name("b") == "b"
