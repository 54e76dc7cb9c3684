"""Command line entry point for sigma-deployments library."""

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from .chain import check_network
from .config import load_config
from .constants import DEFAULT_GAS_LIMIT, DEPLOYMENT_PRESETS
from .deployments import deploy, get_preset, load_request, preset_names, request_from_dict

logger = logging.getLogger(__name__)

env_file_option = click.option(
    "--env-file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=None,
    help="dotenv file to read PRIVATE_KEY and overrides from (default: ./.env)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Deploy pre-compiled Sigma contracts to test networks."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger("sigma_deployments").setLevel(level)


@cli.command("deploy")
@click.option("--network", "-n", "network_name", help="Target network (default: preset's network)")
@click.option("--preset", "-p", help="Built-in deployment preset")
@click.option("--contract", "-c", "contract_name", help="Contract name")
@click.option("--arg", "-a", "constructor_args", multiple=True, help="Constructor argument (repeatable)")
@click.option(
    "--params",
    "-f",
    "params_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    help="JSON file with contract_name, constructor_args and gas_limit",
)
@click.option("--gas-limit", type=click.IntRange(min=21_000), default=None, help="Gas limit")
@click.option(
    "--artifacts-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Hardhat artifacts directory (default: ./artifacts)",
)
@env_file_option
def deploy_command(
    network_name, preset, contract_name, constructor_args, params_path, gas_limit, artifacts_dir, env_file
):
    """Deploy one contract instance and log its address."""
    sources = [s for s in (preset, contract_name, params_path) if s]
    if len(sources) != 1:
        raise click.UsageError("Pass exactly one of --preset, --contract or --params")

    if preset:
        try:
            preset_network, request = get_preset(preset)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--preset") from e
        if network_name is not None and network_name != preset_network:
            raise click.BadParameter(
                f"preset '{preset}' is bound to network '{preset_network}', "
                f"not '{network_name}'",
                param_hint="--network",
            )
        network_name = preset_network
    elif params_path:
        try:
            request = load_request(params_path)
        except (KeyError, ValueError) as e:
            raise click.BadParameter(f"invalid params file: {e}", param_hint="--params") from e
    else:
        request = request_from_dict(
            {"contract_name": contract_name, "constructor_args": constructor_args}
        )

    if network_name is None:
        raise click.UsageError("--network is required unless a preset names one")
    if gas_limit is not None:
        request = replace(request, gas_limit=gas_limit)

    try:
        config = load_config(env_file)
        profile = config.network(network_name)
        result = deploy(request, profile, config.require_private_key(), artifacts_dir)
    except Exception as e:
        logger.error("Deployment failed: %s", e, exc_info=logger.isEnabledFor(logging.DEBUG))
        sys.exit(1)

    logger.debug("Explorer: %s", result.url)


@cli.command("networks")
@env_file_option
def networks_command(env_file):
    """List configured networks."""
    config = load_config(env_file)
    for profile in config.networks.values():
        verification = "yes" if profile.explorer_api_key else "no api key"
        click.echo(
            f"{profile.name:<12} chain {profile.chain_id:<9} {profile.rpc_url}  "
            f"explorer {profile.explorer_browser_url} ({verification})"
        )


@cli.command("presets")
def presets_command():
    """List built-in deployment presets."""
    for name in preset_names():
        preset = DEPLOYMENT_PRESETS[name]
        click.echo(
            f"{name:<16} {preset['contract_name']} on {preset['network']} "
            f"({len(preset['constructor_args'])} args, gas {preset.get('gas_limit', DEFAULT_GAS_LIMIT)})"
        )


@cli.command("check")
@click.option("--network", "-n", "network_name", required=True, help="Network to probe")
@env_file_option
def check_command(network_name, env_file):
    """Confirm a network's RPC endpoint serves the configured chain."""
    try:
        profile = load_config(env_file).network(network_name)
        chain_id = check_network(profile)
    except Exception as e:
        logger.error("Check failed: %s", e)
        sys.exit(1)

    click.echo(f"{profile.name}: {profile.rpc_url} serves chain {chain_id}")


@cli.command("verification-metadata")
@click.option("--network", "-n", "network_name", required=True, help="Network to describe")
@env_file_option
def verification_metadata_command(network_name, env_file):
    """Print compiler settings and explorer metadata as JSON."""
    config = load_config(env_file)
    try:
        profile = config.network(network_name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--network") from e

    metadata = {
        "compiler": {
            "version": config.compiler.version,
            "settings": config.compiler.to_solc_settings(),
        },
        "customChain": profile.explorer_chain_entry(),
        "apiKey": profile.explorer_api_key,
    }
    click.echo(json.dumps(metadata, indent=2))


def main():
    cli()


if __name__ == "__main__":
    main()
