import subprocess
from unittest import mock

import pytest

from shipprompt.rust import (
    RustcVersion,
    RustupError,
    ToolchainName,
    env_rustup_toolchain,
    extract_toolchain_from_rustup_override_list,
    extract_toolchain_from_rustup_run_rustc_version,
    find_rust_toolchain_file,
    format_rustc_version,
    get_rust_version,
)

OVERRIDES_INPUT = (
    "/home/user/src/a                                beta-x86_64-unknown-linux-gnu\n"
    "/home/user/src/b                                nightly-x86_64-unknown-linux-gnu\n"
)


def test_override_list_no_overrides():
    assert extract_toolchain_from_rustup_override_list("no overrides\n", "") is None


@pytest.mark.parametrize(
    "cwd, expected",
    [
        ("/home/user/src/a/src", "beta-x86_64-unknown-linux-gnu"),
        ("/home/user/src/b/tests", "nightly-x86_64-unknown-linux-gnu"),
        ("/home/user/src/c/examples", None),
    ],
)
def test_override_list(cwd, expected):
    assert extract_toolchain_from_rustup_override_list(OVERRIDES_INPUT, cwd) == expected


def test_override_list_matches_whole_components():
    text = "/home/user/src/a beta\n"
    assert extract_toolchain_from_rustup_override_list(text, "/home/user/src/abc") is None


def test_run_rustc_version_success():
    outcome = extract_toolchain_from_rustup_run_rustc_version(0, b"rustc 1.34.0\n", b"")
    assert outcome == RustcVersion("rustc 1.34.0\n")


def test_run_rustc_version_toolchain_not_installed():
    outcome = extract_toolchain_from_rustup_run_rustc_version(
        1, b"", b"error: toolchain 'channel-triple' is not installed\n"
    )
    assert outcome == ToolchainName("channel-triple")


@pytest.mark.parametrize(
    "returncode, stdout, stderr",
    [
        (0, b"\xc3\x28", b""),
        (1, b"", b"\xc3\x28"),
        (1, b"", b"error:"),
    ],
)
def test_run_rustc_version_errors(returncode, stdout, stderr):
    outcome = extract_toolchain_from_rustup_run_rustc_version(returncode, stdout, stderr)
    assert outcome == RustupError()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("rustc 1.34.0-nightly (b139669f3 2019-04-10)", "v1.34.0-nightly"),
        ("rustc 1.34.0-beta.1 (2bc1d406d 2019-04-10)", "v1.34.0-beta.1"),
        ("rustc 1.34.0 (91856ed52 2019-04-10)", "v1.34.0"),
        ("rustc 1.34.0", "v1.34.0"),
    ],
)
def test_format_rustc_version(text, expected):
    assert format_rustc_version(text) == expected


def test_env_rustup_toolchain(monkeypatch):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "  stable \n")
    assert env_rustup_toolchain() == "stable"
    monkeypatch.delenv("RUSTUP_TOOLCHAIN")
    assert env_rustup_toolchain() is None


def test_find_rust_toolchain_file_in_current_dir(tmp_path):
    (tmp_path / "rust-toolchain").write_text("nightly-2019-09-01\nignored\n")
    assert find_rust_toolchain_file(tmp_path) == "nightly-2019-09-01"


def test_find_rust_toolchain_file_in_ancestor(tmp_path):
    (tmp_path / "rust-toolchain").write_text("  beta  \n")
    nested = tmp_path / "crates" / "core" / "src"
    nested.mkdir(parents=True)
    assert find_rust_toolchain_file(nested) == "beta"


def test_find_rust_toolchain_file_nearest_wins(tmp_path):
    (tmp_path / "rust-toolchain").write_text("beta\n")
    inner = tmp_path / "inner"
    inner.mkdir()
    (inner / "rust-toolchain").write_text("stable\n")
    assert find_rust_toolchain_file(inner) == "stable"


def test_get_rust_version_with_env_toolchain(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "stable")
    result = subprocess.CompletedProcess(
        ["rustup"], 0, b"rustc 1.34.0 (91856ed52 2019-04-10)\n", b""
    )
    with mock.patch("shipprompt.rust.subprocess.run", return_value=result) as run:
        assert get_rust_version(tmp_path) == "v1.34.0"
        assert run.call_args.args[0] == ["rustup", "run", "stable", "rustc", "--version"]


def test_get_rust_version_toolchain_not_installed(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "channel-triple")
    result = subprocess.CompletedProcess(
        ["rustup"], 1, b"", b"error: toolchain 'channel-triple' is not installed\n"
    )
    with mock.patch("shipprompt.rust.subprocess.run", return_value=result):
        assert get_rust_version(tmp_path) == "channel-triple"


def test_get_rust_version_without_rustup(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "stable")

    def fake_run(args, **kwargs):
        if args[0] == "rustup":
            raise FileNotFoundError("rustup")
        return subprocess.CompletedProcess(args, 0, b"rustc 1.40.0 (abc 2019-12-16)\n", b"")

    with mock.patch("shipprompt.rust.subprocess.run", side_effect=fake_run):
        assert get_rust_version(tmp_path) == "v1.40.0"


def test_get_rust_version_rustup_error(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "stable")
    result = subprocess.CompletedProcess(["rustup"], 1, b"", b"error:")
    with mock.patch("shipprompt.rust.subprocess.run", return_value=result):
        assert get_rust_version(tmp_path) is None