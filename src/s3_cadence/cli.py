"""Command-line interface for s3-cadence.

Commands:
    - report: Average and total time between object modifications under a
      prefix

The bucket and prefix are given either as --bucket/--prefix or as a single
s3://bucket/prefix argument.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .analysis import (
    InsufficientData,
    analyze_prefix_cadence,
    decompose,
    format_breakdown,
)
from .core.exceptions import ValidationError
from .objectstorage.clients import S3ClientManager

app = typer.Typer(
    name="s3-cadence",
    help="Report the upload cadence of an S3 prefix.",
    no_args_is_help=True,
)

INSUFFICIENT_DATA_MESSAGE = "Not enough timestamps to calculate average."


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-cadence {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    S3-Cadence: time between object modifications under an S3 prefix.
    """
    pass


def _resolve_location(
    s3_path: Optional[str], bucket: Optional[str], prefix: Optional[str]
) -> tuple[str, str]:
    """Pick bucket and prefix from either the s3:// path or the options."""
    if s3_path:
        if bucket or prefix is not None:
            raise ValidationError(
                "Give either an s3:// path or --bucket/--prefix, not both"
            )
        return S3ClientManager.parse_s3_path(s3_path)

    if not bucket:
        raise ValidationError("A bucket is required: pass --bucket or an s3:// path")
    return bucket, prefix or ""


@app.command("report")
def report_cmd(
    s3_path: Annotated[
        Optional[str],
        typer.Argument(help="S3 path s3://bucket/prefix (instead of --bucket)"),
    ] = None,
    bucket: Annotated[
        Optional[str], typer.Option("--bucket", "-b", help="S3 bucket name")
    ] = None,
    prefix: Annotated[
        Optional[str],
        typer.Option("--prefix", help="Key prefix (empty for the whole bucket)"),
    ] = None,
    aws_profile: Annotated[
        Optional[str],
        typer.Option("--profile", "-p", help="AWS CLI profile name"),
    ] = None,
    region_name: Annotated[
        str, typer.Option("--region", help="AWS region name")
    ] = "us-east-1",
    endpoint_url: Annotated[
        Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
    ] = None,
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
    max_pages: Annotated[
        Optional[int],
        typer.Option("--max-pages", help="Fail if listing needs more pages", min=1),
    ] = None,
) -> None:
    """
    Report average and total time between object modifications.

    Examples:
        s3-cadence report --bucket ingest --prefix daily/ --profile ops
        s3-cadence report s3://ingest/daily/ --profile ops
    """
    try:
        bucket_name, key_prefix = _resolve_location(s3_path, bucket, prefix)

        typer.echo(f"bucket: {bucket_name}")
        typer.echo(f"profile: {aws_profile or 'default'}\n")
        typer.echo(f"prefix: {key_prefix}\n")

        outcome = analyze_prefix_cadence(
            bucket=bucket_name,
            prefix=key_prefix,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
            max_pages=max_pages,
        )

        if isinstance(outcome, InsufficientData):
            typer.echo(INSUFFICIENT_DATA_MESSAGE)
            return

        typer.echo(
            "Average time between timestamps: "
            f"{format_breakdown(decompose(outcome.average))}"
        )
        typer.echo(
            f"Total time for {outcome.count} files: "
            f"{format_breakdown(outcome.breakdown)}"
        )

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
