import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from reg_notify_github import config
from reg_notify_github.client_id import decode_client_id, encode_client_id
from reg_notify_github.logger import PluginLogger, setup_logging
from reg_notify_github.metric import push_metrics
from reg_notify_github.model import ConnectionParameters
from reg_notify_github.plugin import GitHubNotifierPlugin

app = typer.Typer()


@app.callback()
def init(verbose: bool = typer.Option(False, "--verbose", "-v")):
    setup_logging("DEBUG" if verbose else None)


@app.command()
def notify(
    result_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    client_id: Optional[str] = typer.Option(None, envvar="REG_NOTIFY_CLIENT_ID"),
    owner: Optional[str] = None,
    repository: Optional[str] = None,
    installation_id: Optional[str] = None,
    report_url: Optional[str] = None,
    pr_comment: bool = True,
    pr_comment_behavior: str = "default",
    commit_status: bool = True,
    short_description: bool = False,
    custom_endpoint: Optional[str] = None,
    timeout: Optional[float] = typer.Option(config.REQUEST_TIMEOUT),
    dry_run: bool = typer.Option(config.DRY_RUN),
):
    """Send the comparison result in RESULT_FILE to the reg GitHub app."""
    options = {
        "clientId": client_id,
        "owner": owner,
        "repository": repository,
        "installationId": installation_id,
        "prComment": pr_comment,
        "prCommentBehavior": pr_comment_behavior,
        "setCommitStatus": commit_status,
        "shortDescription": short_description,
        "customEndpoint": custom_endpoint,
        "timeout": timeout,
    }
    comparison_result = json.loads(result_file.read_text())

    plugin = GitHubNotifierPlugin()
    plugin.init(options, PluginLogger(), no_emit=dry_run)

    async def handle():
        await plugin.notify(comparison_result, report_url=report_url)

    try:
        asyncio.run(handle())
    finally:
        push_metrics()


@app.command("decode-client-id")
def decode(client_id: str):
    params = decode_client_id(client_id)
    typer.echo(f"owner: {params.owner}")
    typer.echo(f"repository: {params.repository}")
    typer.echo(f"installation id: {params.installation_id}")


@app.command("encode-client-id")
def encode(owner: str, repository: str, installation_id: str):
    params = ConnectionParameters(
        owner=owner, repository=repository, installation_id=installation_id
    )
    typer.echo(encode_client_id(params))
