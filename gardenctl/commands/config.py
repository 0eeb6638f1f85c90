import logging
from typing import List, Optional

import typer
import yaml

from gardenctl import store
from gardenctl.config import Settings
from gardenctl.errors import GardenctlError
from gardenctl.registry import GardenRegistry
from gardenctl.utils import kube

app = typer.Typer(help="Modify or view the gardenctl configuration.")

logger = logging.getLogger("gardenctl")


def _config_file(ctx: typer.Context) -> str:
    obj = ctx.find_root().obj or {}
    return obj.get("config_file") or Settings.config_file()


def _load_registry(config_file: str) -> GardenRegistry:
    logger.debug(f"Loading configuration from {config_file}")
    try:
        return GardenRegistry.load(config_file)
    except GardenctlError as e:
        _fail(e)


def _fail(error: Exception):
    typer.echo(f"❌ {error}", err=True)
    raise typer.Exit(code=1)


@app.command("add-garden")
def add_garden_cmd(
    ctx: typer.Context,
    kubeconfig: str = typer.Argument(..., help="Path to the kubeconfig of the Garden cluster"),
    name: str = typer.Option("", help="Set name of new cluster. Must be unique. Default is cluster context name"),
    use_context: str = typer.Option("", "--use-context", help="Use specific context of kubeconfig"),
    disable_download: bool = typer.Option(
        False, "--disable-download",
        help="If true, the automatic settings download is disabled. Use this e.g. to add a Garden that is not reachable"
    ),
):
    """Add the Garden cluster that a kubeconfig points to."""
    kubeconfig = kubeconfig.strip()
    if not kubeconfig:
        _fail("no kubeconfig path specified")

    config_file = _config_file(ctx)
    try:
        kubeconfig_file = store.expand_home(kubeconfig)

        if use_context:
            context_name = use_context
        else:
            context_name = kube.current_context(kubeconfig_file)
        name = name or context_name

        registry = _load_registry(config_file)

        cluster_config = None
        if not disable_download:
            cluster_config = kube.download_cluster_config(
                kubeconfig_file, context_name,
                Settings.CLUSTER_CONFIG_NAME, Settings.CLUSTER_CONFIG_NAMESPACE,
            )
            if cluster_config is None:
                logger.info(f"No cluster configuration found for {name}, adding it without")

        garden = registry.add_garden(name, kubeconfig_file, use_context, cluster_config, config_file)
    except GardenctlError as e:
        _fail(e)

    logger.debug(f"Saved configuration to {config_file}")
    typer.echo(f"✅ Garden {garden.name} added")


@app.command("set-garden")
def set_garden_cmd(
    ctx: typer.Context,
    name: str = typer.Argument("", help="Name of the Garden"),
    kubeconfig: Optional[str] = typer.Option(
        None, help="Path to kubeconfig file for this Garden cluster"
    ),
    context: Optional[str] = typer.Option(None, help="Use specific context of kubeconfig"),
    identity: Optional[str] = typer.Option(None, help="Cluster identity of the Garden cluster"),
    aliases: Optional[List[str]] = typer.Option(None, help="Alternative names for the Garden, can be repeated"),
):
    """Modify or add a Garden in the gardenctl configuration."""
    name = name.strip()
    if not name:
        _fail("garden name is required")

    config_file = _config_file(ctx)
    registry = _load_registry(config_file)
    try:
        if kubeconfig is not None:
            kubeconfig = store.expand_home(kubeconfig)
        garden = registry.set_garden(
            name,
            config_file,
            kubeconfig=kubeconfig,
            context=context,
            identity=identity,
            aliases=aliases or None,
        )
    except GardenctlError as e:
        _fail(e)

    typer.echo(f"✅ Garden {garden.name} configured")


@app.command("view")
def view_cmd(ctx: typer.Context):
    """Print the gardenctl configuration."""
    registry = _load_registry(_config_file(ctx))
    typer.echo(yaml.safe_dump(registry.config.to_dict(), sort_keys=False), nl=False)


@app.command("resolve")
def resolve_cmd(ctx: typer.Context, value: str = typer.Argument(..., help="Garden name or alias")):
    """Print the name of the Garden a name or alias refers to."""
    registry = _load_registry(_config_file(ctx))
    try:
        typer.echo(registry.garden_name(value))
    except GardenctlError as e:
        _fail(e)


@app.command("match")
def match_cmd(ctx: typer.Context, value: str = typer.Argument(..., help="Target string")):
    """Split a target string using the configured match patterns."""
    registry = _load_registry(_config_file(ctx))
    try:
        tm = registry.match_pattern(value)
        if tm.garden:
            tm.garden = registry.garden_name(tm.garden)
    except GardenctlError as e:
        _fail(e)

    for key, val in tm.to_dict().items():
        typer.echo(f"{key}: {val}")
