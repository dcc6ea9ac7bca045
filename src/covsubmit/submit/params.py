"""Upload parameter sets and query string construction.

A parameter set is an insertion-ordered dict. Insertion order is the order of
the emitted query string, so merging must append rather than rebuild.
"""

from __future__ import annotations

from collections.abc import Mapping

from covsubmit.config.constants import CONTROL_PARAMS, UPLOAD_PATH

ParamValue = str | bool | int
Params = dict[str, ParamValue]


def set_defaults(params: Mapping[str, ParamValue], /, **defaults: ParamValue) -> Params:
    """Return params extended with every default whose key is not yet present.

    Existing keys keep their value and position; new keys are appended in
    the order given. Applying the same defaults again is a no-op.
    """
    merged: Params = dict(params)
    for name, value in defaults.items():
        if name not in merged:
            merged[name] = value
    return merged


def upload_params(params: Mapping[str, ParamValue]) -> Params:
    """Parameters that are transmitted, i.e. everything but control parameters."""
    return {k: v for k, v in params.items() if k not in CONTROL_PARAMS}


def format_value(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_upload_uri(base_url: str, params: Mapping[str, ParamValue]) -> str:
    """Build ``<base_url>/upload/v2?&k=v...``.

    Values are inserted as-is. Callers are responsible for any escaping
    (providers already emit %2F for embedded slashes).
    """
    uri = f"{base_url}{UPLOAD_PATH}?"
    for name, value in upload_params(params).items():
        uri = f"{uri}&{name}={format_value(value)}"
    return uri
