"""covsubmit submit command - upload LCOV coverage to Codecov."""

from pathlib import Path

import click
import httpx

from covsubmit.core.errors import CovSubmitError
from covsubmit.coverage.lcov import read_lcov
from covsubmit.coverage.models import CoverageParseError, FileCoverage
from covsubmit.git.errors import GitError
from covsubmit.submit.ops import RESERVED_KEYWORDS, submit, submit_local
from covsubmit.submit.params import Params


def _parse_param(item: str) -> tuple[str, str]:
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--param")
    if key in RESERVED_KEYWORDS:
        raise click.BadParameter(
            f"{key!r} is reserved and cannot be sent as an upload parameter",
            param_hint="--param",
        )
    return key, value


@click.command()
@click.argument(
    "lcov_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--local",
    is_flag=True,
    help="Take branch and commit from a git checkout instead of CI variables",
)
@click.option(
    "--repo",
    "repo_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Repository root (default: current directory)",
)
@click.option("--dry-run", is_flag=True, help="Print the upload URL without sending")
@click.option("--url", "codecov_url", default=None, help="Codecov base URL, without trailing /")
@click.option("--token", default=None, help="Repository upload token")
@click.option("-p", "--param", "extra", multiple=True, help="Extra upload parameter KEY=VALUE")
@click.pass_context
def submit_command(
    ctx: click.Context,
    lcov_files: tuple[Path, ...],
    local: bool,
    repo_dir: Path | None,
    dry_run: bool,
    codecov_url: str | None,
    token: str | None,
    extra: tuple[str, ...],
) -> None:
    """Upload coverage from LCOV_FILES to Codecov.

    Source paths are made relative to the repository root.
    """
    base_path = (repo_dir or Path.cwd()).resolve()

    params: Params = {}
    if token is not None:
        params["token"] = token
    if codecov_url is not None:
        params["codecov_url"] = codecov_url
    for item in extra:
        key, value = _parse_param(item)
        params[key] = value
    if dry_run:
        params["dry_run"] = True

    config = ctx.obj["config"] if ctx.obj else None
    try:
        fcs: list[FileCoverage] = []
        for path in lcov_files:
            fcs.extend(read_lcov(path, base_path=base_path))
        if local:
            submit_local(fcs, repo_dir, config=config, **params)
        else:
            submit(fcs, config=config, **params)
    except (CovSubmitError, GitError, CoverageParseError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e
