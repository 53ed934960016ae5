#!/usr/bin/env python3
import json
import os
import tempfile
import unittest

from update_monitor.config import Config, load_config, parse_config
from update_monitor.exceptions import ConfigError


VALID_CONFIG = {
    "patterns": ["secrets/.*", r"\.env$"],
    "ref": "refs/heads/main",
    "slack": "https://hooks.slack.com/services/T000/B000/XXXX",
    "port": 8080,
}


class TestParseConfig(unittest.TestCase):
    def test_valid(self):
        config = parse_config(VALID_CONFIG)
        self.assertEqual(config, Config(
            patterns=("secrets/.*", r"\.env$"),
            ref="refs/heads/main",
            slack="https://hooks.slack.com/services/T000/B000/XXXX",
            port=8080,
        ))

    def test_port_as_string(self):
        self.assertEqual(parse_config(dict(VALID_CONFIG, port="9000")).port, 9000)

    def test_invalid_port(self):
        for port in ["abc", 0, 70000, True, 80.5, None]:
            with self.subTest(port=port):
                with self.assertRaises(ConfigError):
                    parse_config(dict(VALID_CONFIG, port=port))

    def test_missing_field(self):
        data = {k: v for k, v in VALID_CONFIG.items() if k != 'slack'}
        with self.assertRaises(ConfigError) as ctx:
            parse_config(data)
        self.assertIn('slack', ctx.exception.message)

    def test_patterns_must_be_strings(self):
        with self.assertRaises(ConfigError):
            parse_config(dict(VALID_CONFIG, patterns=["ok", 1]))

    def test_not_an_object(self):
        with self.assertRaises(ConfigError):
            parse_config(["patterns"])

    def test_config_is_immutable(self):
        config = parse_config(VALID_CONFIG)
        with self.assertRaises(AttributeError):
            config.ref = "refs/heads/other"


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix='.json')
        os.close(fd)

    def tearDown(self):
        os.unlink(self.path)

    def write(self, content):
        with open(self.path, 'w', encoding='utf-8') as fp:
            fp.write(content)

    def test_load(self):
        self.write(json.dumps(VALID_CONFIG))
        self.assertEqual(load_config(self.path).port, 8080)

    def test_invalid_json(self):
        self.write('{"patterns": [')
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_deeply_nested_json(self):
        self.write('[' * 100000 + ']' * 100000)
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_not_utf8(self):
        with open(self.path, 'wb') as fp:
            fp.write(b'{"ref": "\xc3\x28"}')
        with self.assertRaises(ConfigError):
            load_config(self.path)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(self.path + '.missing')

    def test_reload_reflects_changes(self):
        self.write(json.dumps(VALID_CONFIG))
        self.assertEqual(load_config(self.path).patterns, ("secrets/.*", r"\.env$"))
        self.write(json.dumps(dict(VALID_CONFIG, patterns=["vendor/"])))
        self.assertEqual(load_config(self.path).patterns, ("vendor/",))


if __name__ == '__main__':
    unittest.main()
