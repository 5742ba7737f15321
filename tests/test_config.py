import unittest
from unittest.mock import patch

import requests

from u301mcp.config import DEFAULT_API_BASE, DEFAULT_DOMAIN, U301Config, load_config
from u301mcp.Error.u301_error import ConfigurationError


class TestLoadConfig(unittest.TestCase):

    def test_defaults(self):
        config = load_config({"U301_API_KEY": "key"})

        self.assertEqual(config, U301Config(api_key="key"))
        self.assertEqual(config.domain, DEFAULT_DOMAIN)
        self.assertIsNone(config.workspace_id)
        self.assertEqual(config.api_base, DEFAULT_API_BASE)
        self.assertEqual(config.user_agent, "mcp-server-app/1.0.0")

    def test_overrides(self):
        config = load_config({
            "U301_API_KEY": "key",
            "DOMAIN": "go.example.com",
            "WORKSPACE_ID": "ws_1",
            "U301_API_BASE": "http://localhost:8080/v3/",
        })

        self.assertEqual(config.domain, "go.example.com")
        self.assertEqual(config.workspace_id, "ws_1")
        self.assertEqual(config.api_base, "http://localhost:8080/v3")

    def test_empty_values_fall_back(self):
        config = load_config({"U301_API_KEY": "key", "DOMAIN": "", "WORKSPACE_ID": ""})
        self.assertEqual(config.domain, DEFAULT_DOMAIN)
        self.assertIsNone(config.workspace_id)

    def test_missing_api_key(self):
        with self.assertRaises(ConfigurationError) as cm:
            load_config({"DOMAIN": "go.example.com"})
        self.assertIn("U301_API_KEY", str(cm.exception))

        with self.assertRaises(ConfigurationError):
            load_config({"U301_API_KEY": ""})

    def test_config_is_immutable(self):
        config = load_config({"U301_API_KEY": "key"})
        with self.assertRaises(AttributeError):
            config.domain = "other.example.com"

    @patch('u301mcp.vault_utils.read_secret')
    def test_vault_fills_missing_values(self, mock_read_secret):
        mock_read_secret.return_value = {"U301_API_KEY": "vault-key", "DOMAIN": "vault.example.com"}

        config = load_config({"U301_VAULT_PATH": "u301", "DOMAIN": "env.example.com"})

        mock_read_secret.assert_called_once_with("u301", mount="secret")
        self.assertEqual(config.api_key, "vault-key")
        self.assertEqual(config.domain, "env.example.com")

    @patch('u301mcp.vault_utils.read_secret')
    def test_vault_not_read_without_path(self, mock_read_secret):
        load_config({"U301_API_KEY": "key"})
        mock_read_secret.assert_not_called()

    @patch('u301mcp.vault_utils.read_secret', return_value={})
    def test_vault_without_key_still_fails(self, mock_read_secret):
        with self.assertRaises(ConfigurationError):
            load_config({"U301_VAULT_PATH": "u301", "U301_VAULT_MOUNT": "kv"})
        mock_read_secret.assert_called_once_with("u301", mount="kv")

    @patch('u301mcp.vault_utils.hvac.Client')
    def test_unreachable_vault_is_a_configuration_error(self, mock_hvac_client):
        read = mock_hvac_client.return_value.secrets.kv.v1.read_secret
        read.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with self.assertRaises(ConfigurationError) as cm:
            load_config({"U301_VAULT_PATH": "u301"})
        self.assertIn("Could not reach Vault", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
