"""Shared fixtures: a fake runner standing in for git, cargo, x.py and rustup."""

import os
import pytest

from errors import CommandError
from toolchain import ToolchainSpec
from workspace import WorkspacePaths


class FakeRunner:
    """Records every command and mimics the side effects the stages rely on.

    The compiler checkout's submodule is modelled as a configured url and a
    checked-out branch, plus the (url, branch) pair last committed.
    """

    def __init__(self, spec, submodule_url="https://github.com/rust-lang/llvm-project.git"):
        self.spec = spec
        self.calls = []
        self.fail_on = set()
        self.submodule_url = submodule_url
        self.submodule_branch = "main"
        self.committed = (submodule_url, "main")

    @property
    def labels(self):
        return [c[0] for c in self.calls]

    def commands(self, cmd=None):
        return [c for c in self.calls if cmd is None or c[1] == cmd]

    def _record(self, cmd, args, cwd, label):
        args = [str(a) for a in args]
        self.calls.append((label, cmd, args, cwd))
        if label in self.fail_on:
            raise CommandError(label, 1)
        return args

    def run(self, cmd, args, cwd=None, label=None):
        args = self._record(cmd, args, cwd, label)
        if cmd != "git":
            return
        if args[0] == "clone":
            dest = args[-1]
            os.makedirs(dest)
            if args[-2] == self.spec.rust_repo:
                os.makedirs(os.path.join(dest, ".git", "modules", "src", "llvm-project"))
                os.makedirs(os.path.join(dest, "src", "llvm-project"))
        elif args[:2] == ["submodule", "add"]:
            self.submodule_url = args[3]
            os.makedirs(os.path.join(cwd, args[4]), exist_ok=True)
        elif args[0] == "checkout":
            self.submodule_branch = args[2]
        elif args[0] == "commit":
            self.committed = (self.submodule_url, self.submodule_branch)

    def status(self, cmd, args, cwd=None, label=None):
        self._record(cmd, args, cwd, label)
        return 0 if self.committed == (self.submodule_url, self.submodule_branch) else 1

    def output(self, cmd, args, cwd=None, label=None):
        self._record(cmd, args, cwd, label)
        return self.submodule_url


@pytest.fixture
def spec():
    return ToolchainSpec()


@pytest.fixture
def paths(tmp_path, spec):
    project = tmp_path / "project"
    project.mkdir()
    return WorkspacePaths(str(project), str(tmp_path / "cache" / spec.cache_name))


@pytest.fixture
def runner(spec):
    return FakeRunner(spec)
