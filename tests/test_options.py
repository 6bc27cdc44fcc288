from __future__ import annotations

from collections import OrderedDict, deque

from gitcliff.options import options_to_args, to_hyphen_case


def test_hyphen_case_conversion() -> None:
    assert to_hyphen_case("topoOrder") == "topo-order"
    assert to_hyphen_case("githubToken") == "github-token"
    assert to_hyphen_case("fromContext") == "from-context"
    assert to_hyphen_case("tag") == "tag"
    assert to_hyphen_case("bumpedVersion") == "bumped-version"


def test_hyphen_case_accepts_snake_case() -> None:
    assert to_hyphen_case("topo_order") == "topo-order"
    assert to_hyphen_case("with_tag_message") == "with-tag-message"


def test_options_to_args_documented_example() -> None:
    args = options_to_args({"tag": "1.0.0", "config": "github", "topoOrder": True, "unreleased": False})
    assert args == ["--tag", "1.0.0", "--config", "github", "--topo-order"]


def test_false_and_none_are_dropped() -> None:
    args = options_to_args({"latest": False, "output": None, "verbose": True})
    assert args == ["--verbose"]


def test_lists_repeat_flag_in_order() -> None:
    args = options_to_args({"ignoreTags": ["v0.1.0", "v0.2.0-rc"], "skipCommit": ("abc",)})
    assert args == ["--ignore-tags", "v0.1.0", "--ignore-tags", "v0.2.0-rc", "--skip-commit", "abc"]


def test_empty_list_emits_nothing() -> None:
    assert options_to_args({"countTags": [], "current": True}) == ["--current"]


def test_unknown_keys_pass_through() -> None:
    assert options_to_args({"someFutureOption": "x", "offline": True}) == ["--some-future-option", "x", "--offline"]


def test_insertion_order_is_kept() -> None:
    options = OrderedDict([("workdir", "repo"), ("bump", "minor"), ("strip", "header")])
    assert options_to_args(options) == ["--workdir", "repo", "--bump", "minor", "--strip", "header"]


def test_non_string_values_are_stringified() -> None:
    assert options_to_args({"init": "minimal", "githubRepo": 42}) == ["--init", "minimal", "--github-repo", "42"]


def test_any_sequence_repeats_flag() -> None:
    args = options_to_args({"includePath": deque(["src/**", "docs/**"]), "tag": "v2"})
    assert args == ["--include-path", "src/**", "--include-path", "docs/**", "--tag", "v2"]
