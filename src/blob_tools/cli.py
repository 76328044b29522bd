"""Command-line interface for blob-tools.

Commands:
    - list: Stream the objects under an S3 prefix, filtered on the client side

Output goes to stdout, one key per line or as a JSON array. Logs go to stderr.
"""

import sys
from datetime import datetime
from typing import Annotated, Optional

import typer

from . import __version__
from .core.exceptions import BlobToolsError
from .objectstorage.clients import S3ClientConfig
from .objectstorage.listing import S3BucketLister, build_filter, get_renderer
from .objectstorage.listing.renderers import Renderer

app = typer.Typer(
    name="blob-tools",
    help="Lazy, filtered listing of S3-compatible object storage.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"blob-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Blob-Tools: list S3 objects page by page with client-side filters.
    """
    pass


@app.command("list")
def list_cmd(
    path: Annotated[str, typer.Argument(help="S3 path to list (s3://bucket/prefix)")],
    # Credentials
    access_key_id: Annotated[
        Optional[str],
        typer.Option("--access-key-id", help="AWS access key ID"),
    ] = None,
    secret_access_key: Annotated[
        Optional[str],
        typer.Option("--secret-access-key", help="AWS secret access key"),
    ] = None,
    session_token: Annotated[
        Optional[str],
        typer.Option("--session-token", help="AWS session token"),
    ] = None,
    aws_profile: Annotated[
        Optional[str],
        typer.Option("--aws-profile", help="AWS CLI profile name"),
    ] = None,
    # Client
    region_name: Annotated[
        Optional[str], typer.Option("--region", help="AWS region name")
    ] = None,
    endpoint_url: Annotated[
        Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
    ] = None,
    max_attempts: Annotated[
        Optional[int],
        typer.Option("--max-attempts", min=1, help="Total attempts per request"),
    ] = None,
    retry_mode: Annotated[
        Optional[str],
        typer.Option(
            "--retry-mode", help="Retry mode: 'legacy', 'standard' or 'adaptive'"
        ),
    ] = None,
    # Listing
    max_keys: Annotated[
        Optional[int],
        typer.Option(
            "--max-keys", min=1, max=1000, help="Maximum number of keys per page"
        ),
    ] = None,
    # Filters
    regex: Annotated[
        Optional[str],
        typer.Option("--regex", help="Keep keys fully matching this expression"),
    ] = None,
    suffix: Annotated[
        Optional[str], typer.Option("--suffix", help="Keep keys ending with this")
    ] = None,
    min_size: Annotated[
        Optional[int],
        typer.Option("--min-size", min=0, help="Keep objects of at least N bytes"),
    ] = None,
    older_than: Annotated[
        Optional[datetime],
        typer.Option(
            "--older-than", help="Keep objects last modified before this time"
        ),
    ] = None,
    # Output
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output style: 'text' or 'json'")
    ] = "text",
) -> None:
    """
    List objects under an S3 prefix.

    Examples:
        blob-tools list s3://bucket/prefix --aws-profile myprofile
        blob-tools list s3://bucket/logs/ --suffix .gz --min-size 1024 -o json
        blob-tools list s3://bucket/ --endpoint-url http://localhost:4566 \
            --max-keys 100 --regex '.*/2024-.*\\.csv'
    """
    try:
        renderer: Renderer = get_renderer(output)
        predicate = build_filter(
            regex=regex, suffix=suffix, min_size=min_size, older_than=older_than
        )

        config_kwargs = {}
        if region_name is not None:
            config_kwargs["region_name"] = region_name

        config = S3ClientConfig(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            max_attempts=max_attempts,
            retry_mode=retry_mode,
            **config_kwargs,
        )

        lister = S3BucketLister(config).iter_objects(
            path, predicate=predicate, max_keys_per_page=max_keys
        )
        renderer(lister, sys.stdout)

    except (BlobToolsError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
