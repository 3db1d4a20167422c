from pathlib import PurePosixPath

import pytest

from shipprompt.directory import contract_path, to_fish_style, truncate


def test_contract_home_directory():
    output = contract_path(
        "/Users/astronaut/schematics/rocket", "/Users/astronaut", "~"
    )
    assert output == "~/schematics/rocket"


def test_contract_repo_directory():
    output = contract_path(
        "/Users/astronaut/dev/rocket-controls/src",
        "/Users/astronaut/dev/rocket-controls",
        "rocket-controls",
    )
    assert output == "rocket-controls/src"


def test_contract_exact_top_level():
    assert contract_path("/Users/astronaut", "/Users/astronaut", "~") == "~"


def test_contract_outside_top_level():
    output = contract_path("/opt/tools", "/Users/astronaut", "~")
    assert output == "/opt/tools"


def test_contract_requires_whole_components():
    output = contract_path("/Users/astronautics", "/Users/astronaut", "~")
    assert output == "/Users/astronautics"


def test_contract_accepts_path_objects():
    output = contract_path(
        PurePosixPath("/home/user/project"), PurePosixPath("/home/user"), "~"
    )
    assert output == "~/project"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("~/starship", "~/starship"),
        ("~/starship/engines", "~/starship/engines"),
        ("~/starship/engines/booster", "starship/engines/booster"),
        ("~/starship/engines/booster/rocket", "engines/booster/rocket"),
        ("/starship/engines/booster", "/starship/engines/booster"),
        ("/starship/engines/booster/rocket", "engines/booster/rocket"),
    ],
)
def test_truncate(path, expected):
    assert truncate(path, 3) == expected


def test_truncate_zero_length_keeps_path():
    assert truncate("/a/b/c/d/e", 0) == "/a/b/c/d/e"


def test_fish_style_with_user_home_contracted_path():
    output = to_fish_style(
        1, "~/starship/engines/booster/rocket", "engines/booster/rocket"
    )
    assert output == "~/s/"


def test_fish_style_with_user_home_contracted_path_and_dot_dir():
    output = to_fish_style(
        1, "~/.starship/engines/booster/rocket", "engines/booster/rocket"
    )
    assert output == "~/.s/"


def test_fish_style_with_no_contracted_path():
    output = to_fish_style(
        1, "/absolute/Path/not/in_a/repo/but_nested", "repo/but_nested"
    )
    assert output == "/a/P/n/i/"


def test_fish_style_with_pwd_dir_len_no_contracted_path():
    output = to_fish_style(
        2, "/absolute/Path/not/in_a/repo/but_nested", "repo/but_nested"
    )
    assert output == "/ab/Pa/no/in/"


def test_fish_style_with_duplicate_directories():
    output = to_fish_style(1, "~/starship/tmp/C++/C++/C++", "C++")
    assert output == "~/s/t/C/C/"