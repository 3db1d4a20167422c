import subprocess
from unittest import mock

import pytest

from shipprompt.environment import (
    get_env_value,
    get_uid,
    nix_shell_label,
    should_show_username,
    trim_hostname,
)


def test_trim_hostname_at_marker():
    assert trim_hostname("box.example.com", ".") == "box"


def test_trim_hostname_without_marker():
    assert trim_hostname("box", ".") == "box"


def test_trim_hostname_empty_marker():
    assert trim_hostname("box.example.com", "") == "box.example.com"


def test_get_env_value_set(monkeypatch):
    monkeypatch.setenv("SHIPPROMPT_TEST_VAR", "hello")
    assert get_env_value("SHIPPROMPT_TEST_VAR", "fallback") == "hello"


def test_get_env_value_default(monkeypatch):
    monkeypatch.delenv("SHIPPROMPT_TEST_VAR", raising=False)
    assert get_env_value("SHIPPROMPT_TEST_VAR", "fallback") == "fallback"
    assert get_env_value("SHIPPROMPT_TEST_VAR", None) is None


@pytest.mark.parametrize("shell_type", ["1", "impure"])
def test_nix_shell_impure(shell_type):
    assert nix_shell_label(shell_type) == "impure"
    assert nix_shell_label(shell_type, impure_msg="dirty") == "dirty"


def test_nix_shell_pure():
    assert nix_shell_label("pure") == "pure"
    assert nix_shell_label("pure", pure_msg="clean") == "clean"


@pytest.mark.parametrize("shell_type", [None, "", "yes"])
def test_nix_shell_outside(shell_type):
    assert nix_shell_label(shell_type, use_name=True, name="dev") is None


def test_nix_shell_with_name():
    assert nix_shell_label("pure", use_name=True, name="dev") == "dev (pure)"


def test_nix_shell_name_missing():
    assert nix_shell_label("impure", use_name=True, name=None) == "impure"


def test_nix_shell_name_ignored_without_flag():
    assert nix_shell_label("pure", use_name=False, name="dev") == "pure"


def _completed(stdout: bytes) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["id", "-u"], 0, stdout=stdout, stderr=b"")


@mock.patch("shipprompt.environment.subprocess.run")
def test_get_uid_parses_output(run):
    run.return_value = _completed(b"1000\n")
    assert get_uid() == 1000


@mock.patch("shipprompt.environment.subprocess.run")
def test_get_uid_bad_output(run):
    run.return_value = _completed(b"nobody\n")
    assert get_uid() is None


@mock.patch("shipprompt.environment.subprocess.run", side_effect=OSError)
def test_get_uid_command_missing(run):
    assert get_uid() is None


def test_username_hidden_for_plain_local_user():
    assert should_show_username("alice", "alice", None, 1000, False) is False


@pytest.mark.parametrize(
    "user, logname, ssh, uid, always",
    [
        ("alice", "bob", None, 1000, False),
        ("alice", "alice", "10.0.0.1 22 10.0.0.2 22", 1000, False),
        ("root", "root", None, 0, False),
        ("alice", "alice", None, 1000, True),
        ("alice", None, None, None, False),
    ],
)
def test_username_shown(user, logname, ssh, uid, always):
    assert should_show_username(user, logname, ssh, uid, always) is True