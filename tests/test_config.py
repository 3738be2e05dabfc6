import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import yaml

from sessh.config import (
    SessionPaths,
    expand_path,
    get_config_value,
    get_default_config,
    load_config,
    locate_home_dir,
    merge_dicts,
    parse_value,
    resolve_paths,
    set_config_value,
)
from sessh.core.errors import ConfigurationError, ReadFailure


class ConfigFileTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_file = Path(self._tmp.name) / "sessh" / "config.yaml"
        patcher = patch("sessh.constants.CONFIG_FILE", self.config_file)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_file_gives_defaults(self):
        self.assertEqual(load_config(), get_default_config())

    def test_file_is_merged_over_defaults(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("ssh:\n  binary: /usr/local/bin/ssh\n")
        config = load_config()
        self.assertEqual(config["ssh"]["binary"], "/usr/local/bin/ssh")
        self.assertEqual(config["ssh"]["extra_args"], [])
        self.assertEqual(config["paths"]["history_file"], "~/.session")

    def test_set_then_get(self):
        set_config_value("ssh.extra_args", ["-A"])
        set_config_value("log.enabled", False)
        self.assertEqual(get_config_value("ssh.extra_args"), ["-A"])
        self.assertIs(get_config_value("log.enabled"), False)
        self.assertIsNone(get_config_value("ssh.missing"))
        saved = yaml.safe_load(self.config_file.read_text())
        self.assertEqual(saved["ssh"]["extra_args"], ["-A"])

    def test_invalid_yaml_raises_configuration_error(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("paths: [unclosed\n")
        with self.assertRaises(ConfigurationError):
            load_config()

    def test_non_mapping_raises_configuration_error(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text("- a\n- b\n")
        with self.assertRaises(ConfigurationError):
            load_config()


class ConfigHelpersTests(unittest.TestCase):
    def test_merge_dicts_is_deep(self):
        merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 5}})
        self.assertEqual(merged, {"a": {"b": 1, "c": 5}, "d": 3})

    def test_parse_value_keeps_types(self):
        self.assertIs(parse_value("true"), True)
        self.assertEqual(parse_value("12"), 12)
        self.assertEqual(parse_value("[-A, -v]"), ["-A", "-v"])
        self.assertEqual(parse_value("alice@h1"), "alice@h1")


class HomeDirectoryTests(unittest.TestCase):
    def test_linux_uses_home(self):
        self.assertEqual(locate_home_dir("linux", {"HOME": "/home/me"}), Path("/home/me"))

    def test_windows_uses_userprofile(self):
        home = locate_home_dir("win32", {"USERPROFILE": "C:\\Users\\me", "HOME": "/ignored"})
        self.assertEqual(home, Path("C:\\Users\\me"))

    def test_unsupported_platform(self):
        with self.assertRaises(ConfigurationError):
            locate_home_dir("sunos5", {"HOME": "/home/me"})

    def test_missing_variable(self):
        with self.assertRaises(ConfigurationError) as ctx:
            locate_home_dir("darwin", {})
        self.assertIsInstance(ctx.exception, ReadFailure)


class ResolvePathsTests(unittest.TestCase):
    def test_defaults_expand_against_home(self):
        paths = resolve_paths(get_default_config(), home=Path("/home/me"))
        self.assertEqual(
            paths,
            SessionPaths(
                history_file=Path("/home/me/.session"),
                known_hosts=Path("/home/me/.ssh/known_hosts"),
            ),
        )

    def test_absolute_paths_need_no_home(self):
        config = {"paths": {"history_file": "/tmp/h", "known_hosts": "/tmp/k"}}
        with patch("sessh.config.locate_home_dir", side_effect=AssertionError("not needed")):
            paths = resolve_paths(config)
        self.assertEqual(paths.history_file, Path("/tmp/h"))
        self.assertEqual(paths.known_hosts, Path("/tmp/k"))

    def test_empty_path_is_rejected(self):
        with self.assertRaises(ConfigurationError):
            resolve_paths({"paths": {"history_file": "", "known_hosts": "/tmp/k"}})

    def test_expand_path(self):
        home = Path("/home/me")
        self.assertEqual(expand_path("~", home), home)
        self.assertEqual(expand_path("~/x/y", home), Path("/home/me/x/y"))
        self.assertEqual(expand_path("/abs", home), Path("/abs"))


if __name__ == "__main__":
    unittest.main()
