"""Tests for the info and name commands."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import typer

from natplat.cli import context as context_mod
from natplat.core.errors import ErrorCode
from natplat.output.console import MockConsole
from natplat.platform import detection
from natplat.platform.host import ENV_OS_ARCH, ENV_OS_NAME, HostProbe


def _clear_detection_caches() -> None:
    detection.host_probe.cache_clear()
    detection.current_platform.cache_clear()
    detection.current_arch.cache_clear()
    detection.detect.cache_clear()


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[MockConsole]:
    """Route command output to a MockConsole and isolate from the real host."""
    import natplat.cli.commands.info as info_cmd
    import natplat.cli.commands.name as name_cmd

    mock = MockConsole()
    real_build_context = context_mod.build_context

    def fake_build_context(**kwargs: Any) -> context_mod.CLIContext:
        return real_build_context(**kwargs, console=mock)

    monkeypatch.setattr(info_cmd, "build_context", fake_build_context)
    monkeypatch.setattr(name_cmd, "build_context", fake_build_context)
    monkeypatch.delenv(ENV_OS_NAME, raising=False)
    monkeypatch.delenv(ENV_OS_ARCH, raising=False)
    monkeypatch.chdir(tmp_path)
    _clear_detection_caches()
    yield mock
    _clear_detection_caches()


def _info(**overrides: Any) -> None:
    from natplat.cli.commands.info import info

    kwargs: dict[str, Any] = {
        "os_name": None,
        "os_arch": None,
        "config": None,
        "as_json": False,
        "strict": False,
        "verbose": False,
    }
    kwargs.update(overrides)
    info(**kwargs)


def _name(kind: str, path: str, **overrides: Any) -> None:
    from natplat.cli.commands.name import name

    kwargs: dict[str, Any] = {"os_name": None, "os_arch": None, "config": None, "verbose": False}
    kwargs.update(overrides)
    name(kind=kind, path=path, **kwargs)


class TestInfoCommand:
    def test_windows_fields(self, console: MockConsole) -> None:
        _info(os_name="Windows 11", os_arch="amd64")
        assert console.messages == [
            "platform: windows",
            "arch: x64",
            "executable: .exe",
            "shared lib: .dll",
            "static lib: .lib",
        ]

    def test_json(self, console: MockConsole) -> None:
        _info(os_name="Linux", os_arch="aarch64", as_json=True)
        data = json.loads(console.text)
        assert data == {
            "platform": "linux",
            "arch": "arm64",
            "executable_suffix": "",
            "shared_library_suffix": ".so",
            "static_library_suffix": ".a",
            "is_unix": True,
            "is_64bit": True,
        }

    def test_unknown_platform_is_not_an_error_by_default(self, console: MockConsole) -> None:
        _info(os_name="BeOS", os_arch="x86")
        assert "platform: unknown" in console.messages
        assert "arch: unknown" in console.messages
        assert "executable: (none)" in console.messages
        assert console.find("unrecognized OS name")
        assert console.has_error() is False

    def test_unknown_platform_strict(self, console: MockConsole) -> None:
        with pytest.raises(typer.Exit) as exc:
            _info(os_name="BeOS", strict=True)
        assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
        assert console.has_error() is True

    def test_verbose_prints_host_strings(self, console: MockConsole) -> None:
        _info(os_name="Darwin", os_arch="aarch64", verbose=True)
        assert console.find("os_name='Darwin' (override)")

    def test_env_override(self, console: MockConsole, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_OS_NAME, "FreeBSD")
        _info(os_arch="riscv64", verbose=True)
        assert "platform: freebsd" in console.messages
        assert "arch: x64" in console.messages
        assert console.find("(env)")

    def test_verbose_matches_detected_host(self, console: MockConsole) -> None:
        linux = HostProbe(os_name="Linux", os_arch="aarch64")
        windows = HostProbe(os_name="Windows", os_arch="AMD64")
        with patch("natplat.platform.detection.probe_host", return_value=linux):
            detection.detect()
        # Later host reads must not leak into the report.
        with patch("natplat.platform.detection.probe_host", return_value=windows):
            _info(verbose=True)
        assert "platform: linux" in console.messages
        assert "arch: arm64" in console.messages
        assert console.find("os_name='Linux' (host), os_arch='aarch64' (host)")
        assert not console.find("Windows")

    def test_config_file(self, console: MockConsole, tmp_path: Path) -> None:
        path = tmp_path / "host.toml"
        path.write_text('[host]\nos_name = "Mac OS X"\nos_arch = "aarch64"\n', encoding="utf-8")
        _info(config=path)
        assert "platform: macos" in console.messages
        assert "arch: arm64" in console.messages

    def test_default_config_in_cwd(self, console: MockConsole, tmp_path: Path) -> None:
        (tmp_path / "natplat.toml").write_text('[host]\nos_name = "Windows 10"\n', encoding="utf-8")
        _info(os_arch="x86")
        assert "platform: windows" in console.messages
        assert "arch: x86" in console.messages

    def test_option_beats_config(self, console: MockConsole, tmp_path: Path) -> None:
        path = tmp_path / "host.toml"
        path.write_text('[host]\nos_name = "Windows 10"\n', encoding="utf-8")
        _info(os_name="Linux", os_arch="ppc64le", config=path)
        assert "platform: linux" in console.messages
        assert "arch: ppc64le" in console.messages

    def test_missing_config_exits(self, console: MockConsole, tmp_path: Path) -> None:
        with pytest.raises(typer.Exit) as exc:
            _info(config=tmp_path / "missing.toml")
        assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
        assert console.find("Config file not found")


class TestNameCommand:
    @pytest.mark.parametrize(
        ("kind", "path", "expected"),
        [
            ("script", "bin/run.sh", "bin/run.bat"),
            ("executable", "ninja", "ninja.exe"),
            ("shared", "dir/foo", "dir/foo.dll"),
            ("static", "foo", "foo.lib"),
            ("shared_library", "foo", "foo.dll"),
            ("STATIC-LIBRARY", "foo", "foo.lib"),
        ],
    )
    def test_windows(self, console: MockConsole, kind: str, path: str, expected: str) -> None:
        _name(kind, path, os_name="Windows 11", os_arch="amd64")
        assert console.messages == [expected]

    def test_linux_shared(self, console: MockConsole) -> None:
        _name("shared", "dir/foo", os_name="Linux")
        assert console.messages == ["dir/libfoo.so"]

    def test_unknown_kind(self, console: MockConsole) -> None:
        with pytest.raises(typer.Exit) as exc:
            _name("bundle", "foo", os_name="Linux")
        assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
        assert console.find("unknown kind: 'bundle'")


class TestParseKind:
    def test_values_and_names(self) -> None:
        from natplat.cli.commands.name import parse_kind
        from natplat.platform.detection import NameKind

        assert parse_kind("script") is NameKind.SCRIPT
        assert parse_kind(" Executable ") is NameKind.EXECUTABLE
        assert parse_kind("shared") is NameKind.SHARED_LIBRARY
        assert parse_kind("static_library") is NameKind.STATIC_LIBRARY
        assert parse_kind("dll") is None
