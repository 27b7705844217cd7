import os
import sys
import tempfile

from dataclasses import dataclass

from errors import BootstrapError

LINKER_DIR = "sbpf-linker"
RUST_DIR = "rust-compiler"
HELPER_DIR = "xtask"

def project_root(start = None):
    root = os.path.realpath(start or os.getcwd())

    # if we're in the helper dir, go up one level
    if os.path.basename(root) == HELPER_DIR:
        root = os.path.dirname(root)

    return root

# platform cache root, None if nothing resolvable
def platform_cache_root():
    xdg = os.environ.get("XDG_CACHE_HOME")

    if xdg and os.path.isabs(xdg):
        return xdg

    if sys.platform == "win32":
        return os.environ.get("LOCALAPPDATA")

    home = os.path.expanduser("~")

    if home == "~":
        return None

    if sys.platform == "darwin":
        return os.path.join(home, "Library", "Caches")

    return os.path.join(home, ".cache")

# tools are built outside the project to keep them out of its cargo workspace
def cache_root():
    return platform_cache_root() or tempfile.gettempdir()

@dataclass(frozen = True)
class WorkspacePaths:
    project_root: str
    cache_dir: str

    @staticmethod
    def locate(spec, root = None, cache_override = None):
        root = project_root(root)

        # a relative override is taken from the project root, not the cwd
        if cache_override:
            base = os.path.join(root, os.path.expanduser(cache_override))
        else:
            base = cache_root()

        return WorkspacePaths(root, os.path.join(os.path.abspath(base), spec.cache_name))

    @property
    def linker_dir(self):
        return os.path.join(self.cache_dir, LINKER_DIR)

    @property
    def linker_bin(self):
        return os.path.join(self.linker_dir, "target", "release", "sbpf-linker")

    @property
    def rust_dir(self):
        return os.path.join(self.cache_dir, RUST_DIR)

    @property
    def stage_dir(self):
        return os.path.join(self.rust_dir, "build", "host", "stage0")

    @property
    def bootstrap_config(self):
        return os.path.join(self.rust_dir, "bootstrap.toml")

    @property
    def cargo_config(self):
        return os.path.join(self.project_root, ".cargo", "config.toml")

    def submodule_dir(self, path):
        return os.path.join(self.rust_dir, *path.split("/"))

    # git keeps the submodule's repository here, not in the working tree
    def submodule_modules_dir(self, path):
        return os.path.join(self.rust_dir, ".git", "modules", *path.split("/"))

    def ensure_cache(self):
        try:
            os.makedirs(self.cache_dir, exist_ok = True)
        except OSError as e:
            raise BootstrapError("failed to create cache directory " + self.cache_dir) from e
