"""Stored CLI settings and the client options derived from them."""

from __future__ import annotations

import dataclasses
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.linkedin.com/rest"
DEFAULT_API_VERSION = "202601"

_YYYYMM = re.compile(r"[0-9]{6}")


@dataclass(frozen=True)
class Settings:
    token: str = ""
    default_account: str = ""
    api_version: str = ""


@dataclass(frozen=True)
class ClientOptions:
    base_url: str
    token: str
    api_version: str
    verbose: bool = False


def validate_version(value: str) -> str:
    """Return value when it is a six-digit YYYYMM string, else raise ValueError."""
    if not _YYYYMM.fullmatch(value):
        raise ValueError(f'invalid version "{value}": expected YYYYMM (6 digits)')
    return value


def resolve_client_options(
    settings: Settings,
    environ: Optional[Mapping[str, str]] = None,
    version_date: str = "",
    verbose: bool = False,
) -> tuple[ClientOptions, Settings]:
    """Apply env overrides (flag > env > file) and build client options.

    Returns the options and the effective settings.
    """
    env = os.environ if environ is None else environ
    overrides = {
        attr: env.get(var, "")
        for attr, var in (
            ("token", "LINKEDIN_ADS_TOKEN"),
            ("default_account", "LINKEDIN_ADS_ACCOUNT"),
            ("api_version", "LINKEDIN_ADS_VERSION"),
        )
    }
    effective = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v})
    if not effective.token:
        raise ValueError("no token — run 'linkedin-ads auth login' first")
    if not effective.api_version:
        effective = dataclasses.replace(effective, api_version=DEFAULT_API_VERSION)
    api_version = effective.api_version
    if version_date:
        if not _YYYYMM.fullmatch(version_date):
            raise ValueError("invalid --version-date: expected YYYYMM (6 digits)")
        api_version = version_date
    options = ClientOptions(
        base_url=env.get("LINKEDIN_ADS_BASE_URL", "") or DEFAULT_BASE_URL,
        token=effective.token,
        api_version=api_version,
        verbose=verbose,
    )
    return options, effective


def default_or(value: str, fallback: str) -> str:
    return value if value else fallback


def format_settings(path: str, settings: Settings) -> str:
    """Render the settings with the token masked."""
    token = "***" if settings.token else "(none)"
    return (
        f"path:            {path}\n"
        f"token:           {token}\n"
        f"default_account: {default_or(settings.default_account, '(none)')}\n"
        f"api_version:     {default_or(settings.api_version, '(none)')}\n"
    )


def set_api_version(settings: Settings, version: str) -> Settings:
    """Settings with a validated API version."""
    return dataclasses.replace(settings, api_version=validate_version(version))


def use_account(settings: Settings, account_id: str) -> Settings:
    """Settings with a new default ad account; other fields are kept."""
    return dataclasses.replace(settings, default_account=account_id)


def current_account(settings: Settings) -> str:
    """The default ad account, or "(none)"."""
    return default_or(settings.default_account, "(none)")