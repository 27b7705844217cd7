from dataclasses import dataclass

RUST_REPO = "https://github.com/blueshift-gg/rust"
RUST_BRANCH = "BPF_i128_ret"
LLVM_REPO = "https://github.com/blueshift-gg/llvm-project.git"
LLVM_BRANCH = "BPF_i128_ret"
LLVM_SUBMODULE = "src/llvm-project"
LINKER_REPO = "https://github.com/blueshift-gg/sbpf-linker"
LINKER_BRANCH = "u128_mul_libcall"
TOOLCHAIN_NAME = "stage1"
TARGET = "bpfel-unknown-none"

# repositories and names of the custom toolchain
# fixed here, built once at startup and handed to every stage
@dataclass(frozen = True)
class ToolchainSpec:
    rust_repo: str = RUST_REPO
    rust_branch: str = RUST_BRANCH
    llvm_repo: str = LLVM_REPO
    llvm_branch: str = LLVM_BRANCH
    llvm_submodule: str = LLVM_SUBMODULE
    linker_repo: str = LINKER_REPO
    linker_branch: str = LINKER_BRANCH
    toolchain_name: str = TOOLCHAIN_NAME
    target: str = TARGET
    stack_size: int = 4096
    change_id: int = 148803
    cache_name: str = "u128-bpf-toolchain"
