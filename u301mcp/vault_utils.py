import logging

import hvac
import requests
from hvac.exceptions import VaultError

from u301mcp.Error.u301_error import ConfigurationError


def read_secret(path: str, mount: str = "secret") -> dict:
    """
    Read a KV v1 secret. Vault address and token come from VAULT_ADDR / VAULT_TOKEN.

    A secret Vault refuses to return reads as empty; an unreachable Vault
    raises ConfigurationError.
    """
    client = hvac.Client()
    try:
        resp = client.secrets.kv.v1.read_secret(path=path, mount_point=mount)
    except VaultError as e:
        logging.error(f"Could not read Vault secret '{mount}/{path}': {e}")
        return {}
    except requests.exceptions.RequestException as e:
        raise ConfigurationError(f"Could not reach Vault to read '{mount}/{path}': {e}") from e
    return resp.get("data") or {}
