"""CI platform detection and metadata extraction.

Each supported platform maps its own environment variables onto the fields
the upload API expects. Detection is a fixed-order scan of indicator
variables; the first one set to "true" (any case) wins.

Multi-part identifiers (AppVeyor job, CircleCI slug) are joined with a
literal "%2F" so they survive as a single query-string value.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

from covsubmit.core.errors import ConfigError
from covsubmit.submit.params import Params

Environment = Mapping[str, str]

ESCAPED_SLASH = "%2F"


class Provider(Enum):
    """Supported CI platforms. Values are the upload API service names."""

    APPVEYOR = "appveyor"
    TRAVIS = "travis-org"
    CIRCLECI = "circleci"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ProviderMetadata:
    """Upload identification fields resolved from a CI environment."""

    service: str
    branch: str
    commit: str
    pull_request: str
    slug: str
    build: str
    job: str | None = None
    build_url: str | None = None

    def to_params(self) -> Params:
        """Ordered upload defaults; unset optional fields are omitted."""
        fields: list[tuple[str, str | None]] = [
            ("service", self.service),
            ("branch", self.branch),
            ("commit", self.commit),
            ("pull_request", self.pull_request),
            ("job", self.job),
            ("build_url", self.build_url),
            ("slug", self.slug),
            ("build", self.build),
        ]
        return {name: value for name, value in fields if value is not None}


def _require(env: Environment, name: str) -> str:
    try:
        return env[name]
    except KeyError as e:
        raise ConfigError.missing_required(name) from e


def _flag(env: Environment, name: str) -> bool:
    return env.get(name, "false").lower() == "true"


def _appveyor(env: Environment) -> ProviderMetadata:
    job = ESCAPED_SLASH.join(
        [
            _require(env, "APPVEYOR_ACCOUNT_NAME"),
            _require(env, "APPVEYOR_PROJECT_SLUG"),
            _require(env, "APPVEYOR_BUILD_VERSION"),
        ]
    )
    return ProviderMetadata(
        service=Provider.APPVEYOR.value,
        branch=_require(env, "APPVEYOR_REPO_BRANCH"),
        commit=_require(env, "APPVEYOR_REPO_COMMIT"),
        pull_request=env.get("APPVEYOR_PULL_REQUEST_NUMBER", ""),
        job=job,
        slug=_require(env, "APPVEYOR_REPO_NAME"),
        build=_require(env, "APPVEYOR_JOB_ID"),
    )


def _travis(env: Environment) -> ProviderMetadata:
    # TRAVIS_PULL_REQUEST is already "false" outside PR builds
    return ProviderMetadata(
        service=Provider.TRAVIS.value,
        branch=_require(env, "TRAVIS_BRANCH"),
        commit=_require(env, "TRAVIS_COMMIT"),
        pull_request=_require(env, "TRAVIS_PULL_REQUEST"),
        job=_require(env, "TRAVIS_JOB_ID"),
        slug=_require(env, "TRAVIS_REPO_SLUG"),
        build=_require(env, "TRAVIS_JOB_NUMBER"),
    )


def _circleci(env: Environment) -> ProviderMetadata:
    slug = ESCAPED_SLASH.join(
        [
            _require(env, "CIRCLE_PROJECT_USERNAME"),
            _require(env, "CIRCLE_PROJECT_REPONAME"),
        ]
    )
    return ProviderMetadata(
        service=Provider.CIRCLECI.value,
        branch=_require(env, "CIRCLE_BRANCH"),
        commit=_require(env, "CIRCLE_SHA1"),
        pull_request=env.get("CIRCLE_PR_NUMBER", "false"),  # same convention as Travis
        build_url=_require(env, "CIRCLE_BUILD_URL"),
        slug=slug,
        build=_require(env, "CIRCLE_BUILD_NUM"),
    )


# Detection order matters: first indicator set to "true" wins.
_INDICATORS: tuple[tuple[str, Provider], ...] = (
    ("APPVEYOR", Provider.APPVEYOR),
    ("TRAVIS", Provider.TRAVIS),
    ("CIRCLECI", Provider.CIRCLECI),
)

_EXTRACTORS: dict[Provider, Callable[[Environment], ProviderMetadata]] = {
    Provider.APPVEYOR: _appveyor,
    Provider.TRAVIS: _travis,
    Provider.CIRCLECI: _circleci,
}


def detect_provider(env: Environment) -> Provider:
    for indicator, provider in _INDICATORS:
        if _flag(env, indicator):
            return provider
    return Provider.NONE


def resolve_metadata(env: Environment) -> ProviderMetadata:
    """Detect the CI platform and extract its metadata.

    Raises:
        ConfigError: No supported platform detected, or the detected
            platform is missing a required variable.
    """
    provider = detect_provider(env)
    extractor = _EXTRACTORS.get(provider)
    if extractor is None:
        raise ConfigError.no_compatible_platform()
    return extractor(env)
