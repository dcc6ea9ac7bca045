"""Submission pipeline - CI, local and generic uploads to a Codecov instance."""

from __future__ import annotations

import os
import warnings
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import httpx

from covsubmit.config.constants import (
    CODECOV_TOKEN_ENV,
    CODECOV_URL_ENV,
    CODECOV_URL_PARAM,
    DEFAULT_CODECOV_URL,
    DRY_RUN_PARAM,
    REPO_TOKEN_ENV,
)
from covsubmit.config.loader import load_config
from covsubmit.config.models import CovSubmitConfig
from covsubmit.core.errors import PreconditionError
from covsubmit.core.logging import get_logger
from covsubmit.coverage.models import FileCoverage
from covsubmit.coverage.serializer import dumps
from covsubmit.git.access import read_head
from covsubmit.submit.params import (
    ParamValue,
    build_upload_uri,
    set_defaults,
    upload_params,
)
from covsubmit.submit.providers import Environment, resolve_metadata

log = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

# Keyword arguments of the submit functions; they cannot double as upload parameters.
RESERVED_KEYWORDS = frozenset({"fcs", "repo_dir", "env", "config"})


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Outcome of a submission. response_body is None for dry runs."""

    uri: str
    dry_run: bool
    response_body: str | None = None


def _environ(env: Environment | None) -> Environment:
    return os.environ if env is None else env


def submit(
    fcs: Sequence[FileCoverage],
    *,
    env: Environment | None = None,
    config: CovSubmitConfig | None = None,
    **params: ParamValue,
) -> UploadResult:
    """Submit coverage from a supported CI platform.

    Branch, commit, build and related fields are taken from the AppVeyor,
    Travis or CircleCI environment unless given explicitly in ``params``.
    When running locally, use ``submit_local``.

    Raises:
        ConfigError: No supported CI platform detected.
    """
    env = _environ(env)
    metadata = resolve_metadata(env)
    log.debug("provider_resolved", service=metadata.service, branch=metadata.branch)
    params = set_defaults(params, **metadata.to_params())
    return submit_generic(fcs, env=env, config=config, **params)


def submit_local(
    fcs: Sequence[FileCoverage],
    repo_dir: Path | str | None = None,
    *,
    env: Environment | None = None,
    config: CovSubmitConfig | None = None,
    **params: ParamValue,
) -> UploadResult:
    """Submit coverage from a local git checkout rooted at ``repo_dir``.

    Branch and commit come from the repository HEAD. A token should be given
    as the ``token`` parameter or via CODECOV_TOKEN; REPO_TOKEN is still
    honored but deprecated.
    """
    env = _environ(env)
    head = read_head(repo_dir if repo_dir is not None else Path.cwd())
    params = set_defaults(params, commit=head.commit, branch=head.branch)

    if REPO_TOKEN_ENV in env:
        click.echo(
            f"the environment variable {REPO_TOKEN_ENV} is deprecated, "
            f"use {CODECOV_TOKEN_ENV} instead"
        )
        log.warning("deprecated_env_var", name=REPO_TOKEN_ENV, replacement=CODECOV_TOKEN_ENV)
        params = set_defaults(params, token=env[REPO_TOKEN_ENV])

    return submit_generic(fcs, env=env, config=config, **params)


def submit_token(*args: Any, **kwargs: Any) -> UploadResult:
    """Deprecated alias of ``submit_local``."""
    warnings.warn(
        "submit_token is deprecated, use submit_local instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return submit_local(*args, **kwargs)


def submit_generic(
    fcs: Sequence[FileCoverage],
    *,
    env: Environment | None = None,
    config: CovSubmitConfig | None = None,
    **params: ParamValue,
) -> UploadResult:
    """Submit coverage to a Codecov instance using explicit upload parameters.

    Every parameter except ``codecov_url`` and ``dry_run`` becomes a query
    parameter of the upload/v2 URI, so names and values must match the
    Codecov API. ``codecov_url`` (or CODECOV_URL) selects the base URL;
    the presence of ``dry_run`` suppresses the HTTP request.

    Raises:
        PreconditionError: Base URL ends with "/" or nothing would be sent.
        httpx.HTTPError: The request failed or the server returned an error.
    """
    env = _environ(env)

    if CODECOV_URL_ENV in env:
        params = set_defaults(params, codecov_url=env[CODECOV_URL_ENV])
    if CODECOV_TOKEN_ENV in env:
        params = set_defaults(params, token=env[CODECOV_TOKEN_ENV])

    codecov_url = str(params.get(CODECOV_URL_PARAM, DEFAULT_CODECOV_URL))
    dry_run = DRY_RUN_PARAM in params

    if codecov_url.endswith("/"):
        raise PreconditionError.trailing_slash(codecov_url)
    if not upload_params(params):
        raise PreconditionError.no_parameters()

    uri = build_upload_uri(codecov_url, params)
    click.echo("Codecov.io API URL:")
    click.echo(uri)

    if dry_run:
        log.info("upload_skipped", reason="dry_run", base_url=codecov_url)
        return UploadResult(uri=uri, dry_run=True)

    config = config or load_config()
    log.info("upload_started", base_url=codecov_url, files=len(fcs))
    response = httpx.post(
        uri,
        content=dumps(fcs),
        headers=JSON_HEADERS,
        timeout=config.upload.timeout_sec,
    )
    response.raise_for_status()

    click.echo("Result of submission:")
    click.echo(response.text)
    log.info("upload_finished", status_code=response.status_code)
    return UploadResult(uri=uri, dry_run=False, response_body=response.text)
