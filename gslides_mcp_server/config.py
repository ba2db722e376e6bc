"""
Credential loading and Slides client construction.

The server authenticates with an OAuth client id/secret and a long-lived
refresh token, all taken from the environment.
"""

import os
from dataclasses import dataclass
from functools import partial
from typing import List, Mapping, Optional

import httplib2
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build

from .client import SlidesClient
from .errors import ConfigError

CLIENT_ID_ENV = "GOOGLE_CLIENT_ID"
CLIENT_SECRET_ENV = "GOOGLE_CLIENT_SECRET"
REFRESH_TOKEN_ENV = "GOOGLE_REFRESH_TOKEN"

TOKEN_URI = "https://oauth2.googleapis.com/token"
SCOPES = [
    "https://www.googleapis.com/auth/presentations",
    "https://www.googleapis.com/auth/drive.readonly",
]


@dataclass(frozen=True)
class SlidesConfig:
    """OAuth credentials for the Slides API."""

    client_id: str
    client_secret: str
    refresh_token: str


def load_config(environ: Optional[Mapping[str, str]] = None) -> SlidesConfig:
    """Read credentials from the environment.

    Raises:
        ConfigError: If any of the three variables is missing or empty.
    """
    env = os.environ if environ is None else environ
    names = [CLIENT_ID_ENV, CLIENT_SECRET_ENV, REFRESH_TOKEN_ENV]
    missing: List[str] = [name for name in names if not env.get(name)]
    if missing:
        raise ConfigError(
            f"{', '.join(missing)} environment variable(s) required. "
            f"Set {', '.join(names)} before starting the server; "
            "run gslides-mcp-auth to obtain a refresh token."
        )
    return SlidesConfig(
        client_id=env[CLIENT_ID_ENV],
        client_secret=env[CLIENT_SECRET_ENV],
        refresh_token=env[REFRESH_TOKEN_ENV],
    )


def build_credentials(config: SlidesConfig) -> Credentials:
    """OAuth user credentials that refresh themselves on first use."""
    return Credentials(
        token=None,
        refresh_token=config.refresh_token,
        client_id=config.client_id,
        client_secret=config.client_secret,
        token_uri=TOKEN_URI,
        scopes=SCOPES,
    )


def authorized_http(credentials: Credentials) -> AuthorizedHttp:
    """A new authorized transport; credentials are shared, connections are not."""
    return AuthorizedHttp(credentials, http=httplib2.Http())


def build_slides_client(config: SlidesConfig) -> SlidesClient:
    """Create the capability handle used by every tool."""
    credentials = build_credentials(config)
    service = build(
        "slides",
        "v1",
        credentials=credentials,
        cache_discovery=False,
    )
    return SlidesClient(service, http_factory=partial(authorized_http, credentials))
