import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dungeon.core.audit import append_audit
from dungeon.core.config import (
    CONFIG_ENV,
    DEFAULT_STYLES,
    ConfigError,
    load_config,
    resolve_config_path,
)


class ConfigTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, text, name="dungeon.yaml"):
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_defaults_without_file(self):
        cfg = load_config(None)
        self.assertFalse(cfg.audit.enabled)
        self.assertEqual(cfg.log_level, "WARNING")
        self.assertEqual(cfg.prompt, "> ")
        self.assertEqual(cfg.styles, DEFAULT_STYLES)

    def test_load_values(self):
        path = self.write(
            "audit:\n"
            "  enabled: true\n"
            "  path: logs/audit.jsonl\n"
            "logging:\n"
            "  level: debug\n"
            "prompt: 'what now? '\n"
            "styles:\n"
            "  win: bold magenta\n"
        )
        cfg = load_config(path)
        self.assertTrue(cfg.audit.enabled)
        self.assertEqual(Path(cfg.audit.path), (self.root / "logs" / "audit.jsonl").resolve())
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.prompt, "what now? ")
        self.assertEqual(cfg.styles["win"], "bold magenta")
        self.assertEqual(cfg.styles["error"], DEFAULT_STYLES["error"])

    def test_empty_file_gives_defaults(self):
        cfg = load_config(self.write(""))
        self.assertEqual(cfg.prompt, "> ")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.root / "missing.yaml")

    def test_unknown_style_tag(self):
        with self.assertRaises(ConfigError):
            load_config(self.write("styles:\n  sparkle: blue\n"))

    def test_non_mapping(self):
        with self.assertRaises(ConfigError):
            load_config(self.write("- just\n- a list\n"))

    def test_resolve_explicit_and_env(self):
        self.assertEqual(resolve_config_path("x.yaml"), Path("x.yaml"))
        with mock.patch.dict(os.environ, {CONFIG_ENV: "/tmp/env.yaml"}):
            self.assertEqual(resolve_config_path(None), Path("/tmp/env.yaml"))

    def test_resolve_searches_parents(self):
        path = self.write("prompt: '$ '\n")
        nested = self.root / "a" / "b"
        nested.mkdir(parents=True)
        env = {k: v for k, v in os.environ.items() if k != CONFIG_ENV}
        with mock.patch.dict(os.environ, env, clear=True), mock.patch("pathlib.Path.cwd", return_value=nested):
            self.assertEqual(resolve_config_path(None), path)


class AuditTests(unittest.TestCase):
    def test_append_audit(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "audit.jsonl"
            append_audit({"event": "session_start"}, str(path))
            append_audit({"event": "command", "command": "look"}, str(path))
            rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        self.assertEqual([r["event"] for r in rows], ["session_start", "command"])
        self.assertTrue(rows[0]["ts"].endswith("Z"))


if __name__ == "__main__":
    unittest.main()
