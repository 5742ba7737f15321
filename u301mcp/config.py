"""
Configuration for the U301 MCP server.

Settings are read once at startup from the environment (a local .env file is
loaded first) and, when U301_VAULT_PATH is set, from a Vault secret for any
value the environment leaves empty.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from u301mcp import __version__
from u301mcp.Error.u301_error import ConfigurationError

DEFAULT_API_BASE = "https://api.u301.com/v3"
DEFAULT_DOMAIN = "u301.co"
USER_AGENT = f"mcp-server-app/{__version__}"

# Keys that may come from Vault when the environment does not set them
VAULT_KEYS = ("U301_API_KEY", "DOMAIN", "WORKSPACE_ID")


@dataclass(frozen=True)
class U301Config:
    api_key: str
    domain: str = DEFAULT_DOMAIN
    workspace_id: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    user_agent: str = USER_AGENT


def _merge_vault_secrets(values: dict) -> dict:
    vault_path = values.get("U301_VAULT_PATH")
    if not vault_path:
        return values

    from u301mcp.vault_utils import read_secret

    secrets = read_secret(vault_path, mount=values.get("U301_VAULT_MOUNT") or "secret")
    merged = dict(values)
    for key in VAULT_KEYS:
        if not merged.get(key) and secrets.get(key):
            merged[key] = secrets[key]
    return merged


def load_config(environ: Optional[Mapping[str, str]] = None) -> U301Config:
    """
    Build the server configuration.

    Args:
        environ: mapping to read instead of os.environ (the .env file is only
            loaded when this is None)

    Raises:
        ConfigurationError: U301_API_KEY is missing or empty
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = _merge_vault_secrets(dict(environ))

    api_key = values.get("U301_API_KEY")
    if not api_key:
        raise ConfigurationError("U301_API_KEY environment variable is required")

    return U301Config(
        api_key=api_key,
        # which domain to use for shortening, empty means the default domain
        domain=values.get("DOMAIN") or DEFAULT_DOMAIN,
        # which workspace to use, empty means the account's default workspace
        workspace_id=values.get("WORKSPACE_ID") or None,
        api_base=(values.get("U301_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
    )
