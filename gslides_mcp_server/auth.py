"""
Obtain a refresh token for GOOGLE_REFRESH_TOKEN.

Runs the installed-app OAuth flow on a local server. Allows:
python -m gslides_mcp_server.auth
"""

import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

from google_auth_oauthlib.flow import InstalledAppFlow

from .config import CLIENT_ID_ENV, CLIENT_SECRET_ENV, SCOPES
from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def client_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Installed-app client configuration built from the environment."""
    env = os.environ if environ is None else environ
    client_id = env.get(CLIENT_ID_ENV)
    client_secret = env.get(CLIENT_SECRET_ENV)
    if not client_id or not client_secret:
        raise ConfigError(
            f"Please set the {CLIENT_ID_ENV} and {CLIENT_SECRET_ENV} environment variables"
        )
    return {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"],
        }
    }


def get_refresh_token(config: Dict[str, Any], port: int = DEFAULT_PORT) -> str:
    """Run the consent flow and return the refresh token."""
    flow = InstalledAppFlow.from_client_config(config, SCOPES)
    # Consent must be forced, otherwise Google omits the refresh token
    # for an account that already authorized this client.
    creds = flow.run_local_server(port=port, access_type="offline", prompt="consent")
    if not creds.refresh_token:
        raise RuntimeError("No refresh token returned by the authorization server")
    return creds.refresh_token


def main():
    """Entry point for gslides-mcp-auth."""
    logging.basicConfig(level=logging.INFO)
    try:
        refresh_token = get_refresh_token(client_config())
    except (ConfigError, RuntimeError) as e:
        logger.error("%s", e)
        sys.exit(1)

    print("\n=== Refresh Token ===")
    print(refresh_token)
    print("========================\n")
    print("Please set this refresh token to the GOOGLE_REFRESH_TOKEN environment variable.")


if __name__ == "__main__":
    main()
