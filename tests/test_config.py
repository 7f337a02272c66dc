from pathlib import Path

import pytest

from cfglink import config


class TestConfig:
    @staticmethod
    def test_default_config() -> None:
        """test_default_config"""
        c = config.Config(load=False)
        assert c.source_root == Path.cwd().resolve()
        assert c.target_root == config._user_config_dir().joinpath("zellij")
        assert c.exclude == frozenset({".git", ".gitignore", "README.md", "LICENSE", "link.sh"})
        assert c.dry_run is False
        assert c.verbose is True

    @staticmethod
    def test_empty_environment_keeps_defaults() -> None:
        """test_empty_environment_keeps_defaults"""
        assert config.Config(environ={}) == config.Config(load=False)

    @staticmethod
    def test_empty_values_keep_defaults() -> None:
        """empty or blank booleans count as unset"""
        assert config.Config(environ={"DRY_RUN": "", "VERBOSE": "  "}) == config.Config(load=False)

    @staticmethod
    def test_overload_config(tmp_path: Path) -> None:
        """test_overload_config"""

        overloads = {
            "DRY_RUN": "true",
            "VERBOSE": "False",
            "CFGLINK_SOURCE": str(tmp_path.joinpath("src")),
            "CFGLINK_TARGET": str(tmp_path.joinpath("dst")),
        }

        c = config.Config(load=False)
        c._overrides(overloads)

        assert c.dry_run is True
        assert c.verbose is False
        assert c.source_root == tmp_path.joinpath("src").resolve()
        assert c.target_root == tmp_path.joinpath("dst").resolve()

    @staticmethod
    def test_environ_is_read_on_init() -> None:
        """test_environ_is_read_on_init"""
        c = config.Config(environ={"DRY_RUN": "yes", "VERBOSE": "0"})
        assert c.dry_run is True
        assert c.verbose is False

    @staticmethod
    def test_bad_boolean() -> None:
        """test_bad_boolean"""
        with pytest.raises(ValueError, match="DRY_RUN"):
            config.Config(environ={"DRY_RUN": "maybe"})


class TestParseBool:
    @staticmethod
    @pytest.mark.parametrize("value", ["true", "TRUE", " 1 ", "yes", "on"])
    def test_true(value: str) -> None:
        """test_true"""
        assert config.parse_bool("X", value) is True

    @staticmethod
    @pytest.mark.parametrize("value", ["false", "False", "0", "no", "off"])
    def test_false(value: str) -> None:
        """test_false"""
        assert config.parse_bool("X", value) is False


class TestWithFlags:
    @staticmethod
    def test_flags_override_environment() -> None:
        """dry run switched on and verbose switched off by flags"""
        c = config.Config(environ={"DRY_RUN": "false", "VERBOSE": "true"})
        f = c.with_flags(dry_run=True, quiet=True)
        assert f.dry_run is True
        assert f.verbose is False

    @staticmethod
    def test_no_flags_keep_environment() -> None:
        """test_no_flags_keep_environment"""
        c = config.Config(environ={"DRY_RUN": "true", "VERBOSE": "false"})
        f = c.with_flags()
        assert f == c
        assert f is not c

    @staticmethod
    def test_roots_and_excludes(tmp_path: Path) -> None:
        """test_roots_and_excludes"""
        c = config.Config(load=False)
        f = c.with_flags(source=str(tmp_path), target=str(tmp_path.joinpath("out")), exclude=("notes.txt",))
        assert f.source_root == tmp_path.resolve()
        assert f.target_root == tmp_path.joinpath("out").resolve()
        assert f.exclude == c.exclude | {"notes.txt"}
        assert "notes.txt" not in c.exclude


class TestRepr:
    @staticmethod
    def test_table(tmp_path: Path) -> None:
        """every field is listed, excludes one per line"""
        c = config.Config(load=False).with_flags(dry_run=True, source=str(tmp_path), exclude=("notes.txt",))
        text = repr(c)

        assert text.startswith("Config:")
        assert f"  source_root  {tmp_path.resolve()}\n" in text
        assert f"  target_root  {c.target_root}\n" in text
        assert "  dry_run      True\n" in text
        assert "  verbose      True\n" in text
        for name in c.exclude:
            assert f"      {name}" in text
        assert text.index(".git") < text.index("notes.txt")
