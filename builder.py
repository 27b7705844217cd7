import repo
import configgen

from submodule import Reconciler

BANNER = "=========================================="

class Builder:
    def __init__(self, spec, paths, runner):
        self.spec = spec
        self.paths = paths
        self.runner = runner

    def build_linker(self):
        self.runner.run("cargo", [ "build", "--release" ], cwd = self.paths.linker_dir, label = "build sbpf-linker")

    def build_compiler(self):
        self.runner.run("./x", [ "build" ], cwd = self.paths.rust_dir, label = "build rust compiler")

    # relinking the same name to the same path is left to rustup
    def link_toolchain(self):
        self.runner.run("rustup", [ "toolchain", "link", self.spec.toolchain_name, self.paths.stage_dir ],
                        label = "link rustup toolchain")

    def setup_linker(self):
        print("  SBPF linker will be built in: " + self.paths.linker_dir)
        self.paths.ensure_cache()

        print("[1/3] Cloning SBPF linker...")
        repo.sync(self.runner, self.paths.linker_dir, self.spec.linker_repo, self.spec.linker_branch, "sbpf-linker")

        print("[2/3] Building SBPF linker...")
        self.build_linker()

        print("[3/3] Updating .cargo/config.toml with linker path...")
        configgen.write_linker_config(self.paths, self.spec)

        print("  SBPF linker ready at: " + self.paths.linker_bin)

    def setup_compiler(self):
        print("  Rust compiler will be built in: " + self.paths.rust_dir)
        self.paths.ensure_cache()

        print("[1/5] Cloning Rust compiler...")
        repo.sync(self.runner, self.paths.rust_dir, self.spec.rust_repo, self.spec.rust_branch, "rust compiler")

        print("[2/5] Updating LLVM submodule...")
        reconciler = Reconciler(self.runner, self.paths, self.spec)
        reconciler.reconcile()

        print("[3/5] Committing submodule update...")
        reconciler.commit_pointer()

        print("[4/5] Building Rust compiler (this may take a while)...")
        configgen.write_bootstrap_config(self.paths, self.spec)
        self.build_compiler()

        print("[5/5] Linking toolchain with rustup...")
        self.link_toolchain()

        print("  Toolchain linked as '{}'".format(self.spec.toolchain_name))

    # the compiler stage runs against an already built linker
    def setup(self):
        self.setup_linker()
        self.setup_compiler()

        print()
        print(BANNER)
        print("Setup complete!")
        print()
        print("Build this project with:")
        print("  sbpf-bootstrap build")
        print("  # or directly:")
        print("  cargo +{} build-bpf".format(self.spec.toolchain_name))
        print(BANNER)

    def build_project(self):
        print("Building project with custom toolchain...")
        self.runner.run("cargo", [ "+" + self.spec.toolchain_name, "build-bpf" ],
                        cwd = self.paths.project_root, label = "build project")
        print("Build complete!")
