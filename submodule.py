"""Pin a submodule of the compiler checkout to the LLVM fork.

The observed URL is read from .gitmodules on every call; the checkout is
owned by git, not by us.
"""

import enum
import os
import shutil

from errors import BootstrapError

class SubmoduleState(enum.Enum):
    PINNED = "pinned"   # .gitmodules already points at the fork
    FOREIGN = "foreign" # upstream, unrelated or missing url

def configured_url(runner, repo_dir, path):
    return runner.output("git", [ "config", "--file", ".gitmodules", "submodule." + path + ".url" ],
                         cwd = repo_dir, label = "read submodule url")

def remove_tree(dir):
    if not os.path.exists(dir):
        return

    try:
        shutil.rmtree(dir)
    except OSError as e:
        raise BootstrapError("failed to remove " + dir) from e

class Reconciler:
    def __init__(self, runner, paths, spec):
        self.runner = runner
        self.paths = paths
        self.spec = spec

        self.path = spec.llvm_submodule
        self.repo_dir = paths.rust_dir
        self.work_dir = paths.submodule_dir(self.path)

    def observe(self):
        if configured_url(self.runner, self.repo_dir, self.path) == self.spec.llvm_repo:
            return SubmoduleState.PINNED

        return SubmoduleState.FOREIGN

    def update(self):
        self.runner.run("git", [ "submodule", "update", "--init", "--recursive", self.path ],
                        cwd = self.repo_dir, label = "update llvm submodule")

    def repoint(self):
        # drop whatever half-state a previous run left behind
        remove_tree(self.paths.submodule_modules_dir(self.path))
        remove_tree(self.work_dir)

        self.runner.run("git", [ "submodule", "add", "-f", self.spec.llvm_repo, self.path ],
                        cwd = self.repo_dir, label = "add llvm submodule")
        self.update()

    def checkout(self):
        branch = self.spec.llvm_branch
        self.runner.run("git", [ "checkout", "-B", branch, "origin/" + branch ],
                        cwd = self.work_dir, label = "checkout LLVM " + branch + " branch")

    def reconcile(self):
        state = self.observe()

        if state is SubmoduleState.PINNED:
            print("  LLVM submodule already points to the fork, skipping re-add")
            self.update()
        else:
            print("  Switching LLVM submodule to " + self.spec.llvm_repo + "...")
            self.repoint()

        # both states end on the required branch
        self.checkout()

        return state

    # x.py wants the submodule pointer committed, not just checked out
    # only the index is compared, local changes inside the submodule are not looked at
    def commit_pointer(self):
        self.runner.run("git", [ "add", self.path ], cwd = self.repo_dir, label = "stage llvm submodule")

        if self.runner.status("git", [ "diff", "--cached", "--quiet" ],
                              cwd = self.repo_dir, label = "diff staged submodule") == 0:
            print("  No changes to commit")
            return False

        self.runner.run("git", [ "commit", "-m", "TMP: update submodule to " + self.spec.llvm_branch ],
                        cwd = self.repo_dir, label = "commit llvm submodule update")
        return True
