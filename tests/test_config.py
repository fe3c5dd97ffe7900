import unittest

from domain.errors import ConfigError
from infrastructure.config import DEFAULT_PORT, load_config


BASE_ENV = {"DISCORD_TOKEN": "token", "HYPIXEL_API_KEY": "key", "MEMBER_ROLE_ID": "1234"}


class LoadConfigTests(unittest.TestCase):
    def test_full_environment(self):
        config = load_config({**BASE_ENV, "PORT": "8080", "LOG_LEVEL": "debug"})
        self.assertEqual(config.discord_token, "token")
        self.assertEqual(config.hypixel_api_key, "key")
        self.assertEqual(config.member_role_id, 1234)
        self.assertEqual(config.port, 8080)
        self.assertEqual(config.host, "0.0.0.0")
        self.assertEqual(config.log_level, "DEBUG")

    def test_port_defaults(self):
        self.assertEqual(load_config(BASE_ENV).port, DEFAULT_PORT)

    def test_missing_required_values_fail(self):
        for name in ("DISCORD_TOKEN", "HYPIXEL_API_KEY"):
            with self.subTest(name=name):
                env = dict(BASE_ENV)
                env[name] = "  "
                with self.assertRaises(ConfigError):
                    load_config(env)

    def test_missing_role_warns_and_disables(self):
        env = {k: v for k, v in BASE_ENV.items() if k != "MEMBER_ROLE_ID"}
        with self.assertLogs("infrastructure.config", level="WARNING"):
            config = load_config(env)
        self.assertIsNone(config.member_role_id)

    def test_invalid_role_warns_and_disables(self):
        with self.assertLogs("infrastructure.config", level="WARNING"):
            config = load_config({**BASE_ENV, "MEMBER_ROLE_ID": "member"})
        self.assertIsNone(config.member_role_id)

    def test_invalid_port_fails(self):
        with self.assertRaises(ConfigError):
            load_config({**BASE_ENV, "PORT": "http"})

    def test_invalid_log_level_fails(self):
        with self.assertRaises(ConfigError):
            load_config({**BASE_ENV, "LOG_LEVEL": "chatty"})

    def test_base_url_overrides_strip_trailing_slash(self):
        config = load_config({**BASE_ENV, "MOJANG_API_URL": "http://localhost:9000/"})
        self.assertEqual(config.mojang_api_url, "http://localhost:9000")


if __name__ == "__main__":
    unittest.main()
