"""Tests for the repository synchronizer."""

import pytest

import repo
from errors import CommandError


def test_clone_when_absent(paths, spec, runner):
    assert repo.sync(runner, paths.linker_dir, spec.linker_repo, spec.linker_branch, "sbpf-linker")
    assert runner.calls == [
        ("clone sbpf-linker", "git",
         ["clone", "--branch", spec.linker_branch, spec.linker_repo, paths.linker_dir], None),
    ]


def test_existing_dir_is_left_alone(paths, spec, runner, capsys):
    """A second sync is a no-op, whatever the directory holds."""
    repo.sync(runner, paths.linker_dir, spec.linker_repo, spec.linker_branch, "sbpf-linker")
    assert not repo.sync(runner, paths.linker_dir, "https://example.com/other", "other", "sbpf-linker")
    assert len(runner.calls) == 1
    assert "already exists, skipping clone" in capsys.readouterr().out


def test_clone_failure_propagates(paths, spec, runner):
    runner.fail_on.add("clone rust compiler")
    with pytest.raises(CommandError, match="clone rust compiler"):
        repo.sync(runner, paths.rust_dir, spec.rust_repo, spec.rust_branch, "rust compiler")
