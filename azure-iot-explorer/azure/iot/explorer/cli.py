# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------
"""Command line interface of the IoT Hub Resource Explorer"""

import asyncio
import logging
import click
from . import constant
from .account import AzureCliAccount
from .config import JsonFileConfigStore, default_settings_path
from .exceptions import ConnectionStringNotFoundError, ExplorerError, extract_error_message
from .explorer import IoTHubResourceExplorer
from .terminal import PyperclipClipboard, TerminalOutputChannel, TerminalPromptSurface

logger = logging.getLogger(__name__)

OPERATION_FAILED_MESSAGE = "Operation failed."


def create_explorer(settings_path, account):
    return IoTHubResourceExplorer(
        account=account,
        prompt=TerminalPromptSurface(),
        output=TerminalOutputChannel(),
        config_store=JsonFileConfigStore(settings_path),
        clipboard=PyperclipClipboard(),
    )


async def _invoke(settings_path, operation):
    account = AzureCliAccount()
    try:
        explorer = create_explorer(settings_path, account)
        return await operation(explorer)
    finally:
        await account.close()


def _execute(ctx, operation):
    """Run an explorer operation to completion, exiting with code 1 if it fails"""
    try:
        return asyncio.run(_invoke(ctx.obj["settings_path"], operation))
    except ExplorerError as e:
        click.secho(str(e), fg="red", err=True)
        ctx.exit(1)
    except Exception as e:
        logger.debug("Operation failed", exc_info=True)
        click.secho(extract_error_message(e, OPERATION_FAILED_MESSAGE), fg="red", err=True)
        ctx.exit(1)


def _load_iothub_connection_string(settings_path):
    connection_string = JsonFileConfigStore(settings_path).get(
        constant.IOTHUB_CONNECTION_STRING_KEY
    )
    if not connection_string:
        raise ConnectionStringNotFoundError(
            "No {} is stored in {}. Run 'create-hub' or 'select-hub' first.".format(
                constant.IOTHUB_CONNECTION_STRING_TITLE, settings_path
            )
        )
    return connection_string


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file the IoT Hub connection string is stored in "
    "(default: ${})".format(constant.SETTINGS_PATH_ENV_VAR),
)
@click.version_option(constant.VERSION, prog_name=constant.APP_NAME)
@click.pass_context
def cli(ctx, verbose, settings_path):
    """Create or select an Azure IoT Hub and work with its credentials."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings_path or default_settings_path()


@cli.command("create-hub")
@click.pass_context
def create_hub(ctx):
    """Create a new IoT Hub and store its connection string."""
    result = _execute(ctx, lambda explorer: explorer.create_iothub())
    if result.is_succeeded:
        click.echo("Connection string stored in {}".format(ctx.obj["settings_path"]))


@cli.command("select-hub")
@click.pass_context
def select_hub(ctx):
    """Select an existing IoT Hub and store its connection string."""
    result = _execute(ctx, lambda explorer: explorer.select_iothub())
    if result.is_succeeded:
        click.echo("Connection string stored in {}".format(ctx.obj["settings_path"]))


@cli.command("copy-connection-string")
@click.pass_context
def copy_connection_string(ctx):
    """Copy the stored IoT Hub connection string to the clipboard."""

    async def operation(explorer):
        return explorer.copy_iothub_connection_string()

    result = _execute(ctx, operation)
    if result.is_succeeded:
        click.echo("IoT Hub connection string copied to clipboard")


@cli.command("copy-device-connection-string")
@click.pass_context
def copy_device_connection_string(ctx):
    """Copy a device connection string to the clipboard."""
    result = _execute(ctx, lambda explorer: explorer.copy_device_connection_string())
    if result.is_succeeded:
        click.echo("Device connection string copied to clipboard")


@cli.command("generate-sas-token")
@click.pass_context
def generate_sas_token(ctx):
    """Generate a SAS token for the IoT Hub."""
    _execute(ctx, lambda explorer: explorer.generate_sas_token_for_iothub())


@cli.command("generate-device-sas-token")
@click.pass_context
def generate_device_sas_token(ctx):
    """Generate a SAS token for a device."""
    _execute(ctx, lambda explorer: explorer.generate_sas_token_for_device())


@cli.command("show-connection-string")
@click.pass_context
def show_connection_string(ctx):
    """Print the stored IoT Hub connection string."""
    try:
        connection_string = _load_iothub_connection_string(ctx.obj["settings_path"])
    except ConnectionStringNotFoundError as e:
        click.secho(str(e), fg="red", err=True)
        ctx.exit(1)
    click.echo(connection_string)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
