"""
Options accepted by the git-cliff executable and their translation to argv.

The mapping is a pass-through contract: known keys are documented in
`Options`, unknown keys are hyphenated the same way and handed to the binary,
which does its own validation.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Literal, TypedDict, Union

_UPPER = re.compile(r"([A-Z])")

StrOrList = Union[str, Sequence[str]]


class Options(TypedDict, total=False):
    # flags
    help: bool
    """Prints help information"""
    version: bool
    """Prints version information"""
    verbose: bool
    """Increases the logging verbosity"""
    bumpedVersion: bool
    """Prints bumped version for unreleased changes"""
    latest: bool
    """Processes the commits starting from the latest tag"""
    current: bool
    """Processes the commits that belong to the current tag"""
    unreleased: bool
    """Processes the commits that do not belong to a tag"""
    topoOrder: bool
    """Sorts the tags topologically"""
    useBranchTags: bool
    """Include only the tags that belong to the current branch"""
    noExec: bool
    """Disables the external command execution"""
    context: bool
    """Prints changelog context as JSON"""

    # options
    init: Union[bool, str]
    """Writes the default configuration file to cliff.toml"""
    bump: Literal["auto", "major", "minor", "patch"]
    """Bumps the version for unreleased changes (binary default: auto)"""
    config: str
    """Sets the configuration file (binary default: cliff.toml)"""
    workdir: str
    """Sets the working directory"""
    repository: StrOrList
    """Sets the git repository"""
    includePath: StrOrList
    """Sets the path to include related commits"""
    excludePath: StrOrList
    """Sets the path to exclude related commits"""
    tagPattern: str
    """Sets the regex for matching git tags"""
    withCommit: StrOrList
    """Sets custom commit messages to include in the changelog"""
    withTagMessage: str
    """Sets custom message for the latest release"""
    ignoreTags: StrOrList
    """Sets the tags to ignore in the changelog"""
    countTags: StrOrList
    """Sets the tags to count in the changelog"""
    skipCommit: StrOrList
    """Sets commits that will be skipped in the changelog"""
    prepend: str
    """Prepends entries to the given changelog file"""
    output: str
    """Writes output to the given file"""
    tag: str
    """Sets the tag for the latest version"""
    body: str
    """Sets the template for the changelog body"""
    fromContext: str
    """Generates changelog from a JSON context"""
    strip: Literal["header", "footer", "all"]
    """Strips the given parts from the changelog"""
    sort: Literal["oldest", "newest"]
    """Sets sorting of the commits inside sections (binary default: oldest)"""
    githubToken: str
    """Sets the GitHub API token"""
    githubRepo: str
    """Sets the GitHub repository"""
    gitlabToken: str
    """Sets the GitLab API token"""
    gitlabRepo: str
    """Sets the GitLab repository"""
    giteaToken: str
    """Sets the Gitea API token"""
    giteaRepo: str
    """Sets the Gitea repository"""
    bitbucketToken: str
    """Sets the Bitbucket API token"""
    bitbucketRepo: str
    """Sets the Bitbucket repository"""


def to_hyphen_case(key: str) -> str:
    """`topoOrder` / `topo_order` -> `topo-order`."""
    return _UPPER.sub(r"-\1", str(key)).lower().replace("_", "-")


def options_to_args(options: Mapping[str, Any]) -> list[str]:
    """
    Turn an options mapping into the argv git-cliff understands.

    Keys keep the mapping's iteration order. `True` becomes a bare flag,
    `False` and `None` drop the key, sequences repeat the flag once per item
    and any other value is emitted as `--flag value`.
    """
    args: list[str] = []
    for key, value in options.items():
        flag = f"--{to_hyphen_case(key)}"
        if value is True:
            args.append(flag)
        elif value is False or value is None:
            continue
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            for item in value:
                args.extend((flag, str(item)))
        else:
            args.extend((flag, str(value)))
    return args
