"""Command line interface for the ObjectScale management client."""

import asyncio
import logging
import sys
import threading
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .api_clients.client_set import ClientSet
from .api_clients.exceptions import APIClientError
from .cli_error_display import CLIErrorDisplay
from .config import build_client, load_config

logger = logging.getLogger(__name__)

console = Console()

DEFAULT_CONFIG_PATH = Path("objectscale.json")


def run_async(coro):
    """Run a coroutine from synchronous CLI code.

    Uses asyncio.run when no loop is running; otherwise runs the coroutine
    on a fresh loop in a worker thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    result = None
    exception: Optional[BaseException] = None

    def run_in_new_loop():
        nonlocal result, exception
        try:
            result = asyncio.run(coro)
        except BaseException as e:
            exception = e

    thread = threading.Thread(target=run_in_new_loop)
    thread.start()
    thread.join()

    if exception:
        raise exception
    return result


def _execute(ctx: click.Context, operation: Callable[[ClientSet], Awaitable[Any]]) -> Any:
    """Load configuration, run ``operation`` against a ClientSet, report errors."""
    config_path = Path(ctx.obj["config_path"])
    try:
        config = load_config(config_path)
        clients = build_client(config)
    except ValueError as e:
        raise click.ClickException(str(e))

    async def runner():
        async with clients:
            return await operation(clients)

    try:
        return run_async(runner())
    except APIClientError as e:
        CLIErrorDisplay().display_error(e, show_technical_details=ctx.obj["verbose"])
        sys.exit(1)


def _params(limit: Optional[int], marker: Optional[str]):
    params = {}
    if limit is not None:
        params["limit"] = str(limit)
    if marker:
        params["marker"] = marker
    return params


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(DEFAULT_CONFIG_PATH),
    envvar="OBJECTSCALE_CONFIG",
    show_default=True,
    help="JSON configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=__version__, prog_name="objectscale-client")
@click.pass_context
def cli(ctx, config_path: str, verbose: bool):
    """Manage an ObjectScale object store from the command line.

    \b
    CONFIGURATION:
      JSON file with endpoint, auth and tls sections. Secrets may come from
      OBJECTSCALE_PASSWORD or OBJECTSCALE_SHARED_SECRET.

    \b
    EXAMPLES:
      objectscale-client buckets list --namespace ns1
      objectscale-client crr pause objectscale-b store-b
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


@cli.group("alert-policies")
def alert_policies():
    """Alert policy commands."""


@alert_policies.command("list")
@click.option("--limit", type=int, help="Maximum number of policies")
@click.option("--marker", help="Continue from a previous page")
@click.pass_context
def alert_policies_list(ctx, limit: Optional[int], marker: Optional[str]):
    """List alert policies."""
    page = _execute(ctx, lambda c: c.alert_policies.list(_params(limit, marker)))

    table = Table(title="Alert Policies")
    table.add_column("Name", style="cyan")
    table.add_column("Metric")
    table.add_column("Enabled")
    for policy in page.items:
        table.add_row(policy.policy_name, policy.metric_name or "", policy.is_enabled or "")
    console.print(table)
    if page.next_marker:
        console.print(f"Next marker: {page.next_marker}")


@alert_policies.command("get")
@click.argument("name")
@click.pass_context
def alert_policies_get(ctx, name: str):
    """Show one alert policy."""
    policy = _execute(ctx, lambda c: c.alert_policies.get(name))
    console.print_json(policy.model_dump_json(by_alias=True, exclude_none=True))


@cli.group()
def buckets():
    """Bucket commands."""


@buckets.command("list")
@click.option("--namespace", required=True, help="Namespace (tenant) to list")
@click.option("--limit", type=int, help="Maximum number of buckets")
@click.option("--marker", help="Continue from a previous page")
@click.pass_context
def buckets_list(ctx, namespace: str, limit: Optional[int], marker: Optional[str]):
    """List buckets of a namespace."""
    params = _params(limit, marker)
    params["namespace"] = namespace
    page = _execute(ctx, lambda c: c.buckets.list(params))

    table = Table(title=f"Buckets in {namespace}")
    table.add_column("Name", style="cyan")
    table.add_column("Owner")
    table.add_column("Created")
    for bucket in page.items:
        table.add_row(bucket.name, bucket.owner or "", bucket.created or "")
    console.print(table)


@cli.group()
def tenants():
    """Tenant commands."""


@tenants.command("list")
@click.pass_context
def tenants_list(ctx):
    """List tenants."""
    tenant_list = _execute(ctx, lambda c: c.tenants.list())

    table = Table(title="Tenants")
    table.add_column("ID", style="cyan")
    table.add_column("Alias")
    table.add_column("Encryption")
    for tenant in tenant_list.items:
        table.add_row(
            tenant.id or "",
            tenant.alias or "",
            "yes" if tenant.encryption_enabled else "no",
        )
    console.print(table)


@cli.group()
def users():
    """Object user commands."""


@users.command("list")
@click.option("--namespace", help="Only users of this namespace")
@click.pass_context
def users_list(ctx, namespace: Optional[str]):
    """List object users."""
    params = {"namespace": namespace} if namespace else {}
    user_list = _execute(ctx, lambda c: c.object_users.list(params))

    table = Table(title="Object Users")
    table.add_column("User", style="cyan")
    table.add_column("Namespace")
    for user in user_list.blob_users:
        table.add_row(user.user_id, user.namespace)
    console.print(table)


@cli.group("federated-stores")
def federated_stores():
    """Federated object store commands."""


@federated_stores.command("list")
@click.pass_context
def federated_stores_list(ctx):
    """List object stores federated for replication."""
    store_list = _execute(ctx, lambda c: c.federated_object_stores.list())

    table = Table(title="Federated Object Stores")
    table.add_column("Store", style="cyan")
    table.add_column("ObjectScale")
    table.add_column("CRR")
    table.add_column("Status")
    for store in store_list.items:
        table.add_row(
            store.object_store_name or store.object_store_id or "",
            store.object_scale_id or "",
            "yes" if store.crr_configured else "no",
            store.replication_status or "",
        )
    console.print(table)


@cli.group()
def crr():
    """Cross-region replication control."""


def _crr_command(action: str, help_text: str):
    @click.argument("dest_object_scale")
    @click.argument("dest_object_store")
    @click.pass_context
    def command(ctx, dest_object_scale: str, dest_object_store: str):
        _execute(
            ctx,
            lambda c: getattr(c.crr, action)(dest_object_scale, dest_object_store),
        )
        console.print(
            f"[green]Replication to {dest_object_scale}/{dest_object_store}: {action} requested[/green]"
        )

    command.__doc__ = help_text
    return crr.command(action)(command)


_crr_command("pause", "Pause replication to a destination store.")
_crr_command("suspend", "Suspend replication to a destination store.")
_crr_command("resume", "Resume replication to a destination store.")
_crr_command("unthrottle", "Remove the replication bandwidth limit.")


@crr.command("throttle")
@click.argument("dest_object_scale")
@click.argument("dest_object_store")
@click.option("--mb-per-second", type=int, required=True, help="Bandwidth limit")
@click.pass_context
def crr_throttle(ctx, dest_object_scale: str, dest_object_store: str, mb_per_second: int):
    """Limit replication bandwidth to a destination store."""
    params = {"throttleMBPerSecond": str(mb_per_second)}
    _execute(
        ctx,
        lambda c: c.crr.throttle(dest_object_scale, dest_object_store, params),
    )
    console.print(
        f"[green]Replication to {dest_object_scale}/{dest_object_store} "
        f"throttled to {mb_per_second} MB/s[/green]"
    )


@cli.group()
def status():
    """Recovery status commands."""


@status.command("rebuild")
@click.argument("object_store")
@click.argument("pod")
@click.argument("namespace")
@click.option("--level", default="1", show_default=True, help="Rebuild level")
@click.pass_context
def status_rebuild(ctx, object_store: str, pod: str, namespace: str, level: str):
    """Show rebuild progress of a storage server pod."""
    info = _execute(
        ctx,
        lambda c: c.status.get_rebuild_status(object_store, pod, namespace, level),
    )
    console.print(f"Status: [bold]{info.status or 'unknown'}[/bold]")
    console.print(f"Level: {info.level}")
    console.print(f"Remaining: {info.remaining_bytes} of {info.total_bytes} bytes")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
