"""Submission pipeline exports."""

from covsubmit.submit.ops import (
    UploadResult,
    submit,
    submit_generic,
    submit_local,
    submit_token,
)
from covsubmit.submit.params import (
    Params,
    ParamValue,
    build_upload_uri,
    set_defaults,
    upload_params,
)
from covsubmit.submit.providers import (
    Provider,
    ProviderMetadata,
    detect_provider,
    resolve_metadata,
)

__all__ = [
    "submit",
    "submit_generic",
    "submit_local",
    "submit_token",
    "UploadResult",
    # Parameters
    "Params",
    "ParamValue",
    "build_upload_uri",
    "set_defaults",
    "upload_params",
    # Providers
    "Provider",
    "ProviderMetadata",
    "detect_provider",
    "resolve_metadata",
]
