# shipprompt

Building blocks for an informative shell prompt. Each module answers one
question about the current shell session and returns a short, display-ready
string, or `None` when there is nothing worth showing.

## Installation

```
pip install shipprompt
```

For running the test suite:

```
pip install "shipprompt[test]"
pytest
```

## What is included

- `shipprompt.segment`: `Color` and `Style` paint text with ANSI escapes;
  `Segment` holds one named value of the prompt with an optional style.
- `shipprompt.utils`: `read_file` returns the text of a file.
- `shipprompt.directory`: `contract_path`, `truncate` and `to_fish_style`
  shorten the working directory for display.
- `shipprompt.duration`: `render_time` turns a duration in seconds into
  `1m30s` style text; `parse_elapsed` reads a duration given as a string.
- `shipprompt.clock`: `format_time`, `create_offset_time_string` and
  `current_time_string` show the time, optionally at a fixed UTC offset given
  in hours (an offset outside -24..24 raises `ValueError`, or falls back to
  local time in `current_time_string`).
- `shipprompt.git_branch`: grapheme-aware branch name truncation with
  `truncate_branch_name`.
- `shipprompt.git_state`: `get_state_description` labels an ongoing merge,
  revert, cherry-pick, bisect, mailbox apply or rebase, with rebase progress
  read from the `.git` directory.
- `shipprompt.toolchains`, `shipprompt.java`, `shipprompt.rust`,
  `shipprompt.dotnet`: detection and formatting of Go, Dart, Python, Ruby,
  Node.js, Java, Rust and .NET versions. `shipprompt.rust.get_rust_version`
  honours `$RUSTUP_TOOLCHAIN`, `rustup override list` and `rust-toolchain`
  files; `shipprompt.dotnet.estimate_dotnet_version` prefers an SDK pinned in a
  nearby `global.json`.
- `shipprompt.package`: `get_package_version` reads the project version from
  `Cargo.toml`, `package.json` or `pyproject.toml` (Poetry) in a directory.
- `shipprompt.kubernetes`: `read_kube_context` returns the current context and
  namespace from `$KUBECONFIG` or `~/.kube/config`.
- `shipprompt.aws`: `get_aws_region` finds the AWS profile and region from the
  environment or the AWS config file; `format_aws_region` prepares it for
  display.
- `shipprompt.memory`: `format_kib`, `percent_sign` and `format_usage` render
  memory and swap usage as a percentage or as sizes.
- `shipprompt.environment`: hostname trimming, environment variable lookup,
  nix-shell labels, `get_uid` and the rule for when to show the user name.

## Example

```python
from shipprompt.directory import contract_path, truncate
from shipprompt.duration import render_time
from shipprompt.toolchains import format_python_version

contract_path("/home/me/projects/app/src", "/home/me", "~")   # "~/projects/app/src"
truncate("~/projects/app/src/lib", 3)                         # "app/src/lib"
render_time(10110)                                            # "2h48m30s"
format_python_version("Python 3.7.2")                         # "v3.7.2"
```

Functions that ask an external tool for its version, such as
`shipprompt.toolchains.get_go_version()` or `shipprompt.java.get_java_version()`,
run that tool and return `None` when it cannot be started.

## What it does not do

The package is a library of parts. It has no command that prints a whole
prompt, no shell integration scripts, and does not read a configuration file:
choosing which parts to show, in what order and in which style is left to the
caller. It does not count staged, modified or untracked files in a git
repository, does not itself determine the repository state or current branch
(callers pass these in), and does not read battery or system memory figures
(callers supply the numbers to `shipprompt.memory`).