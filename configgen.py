import os
import toml

from errors import BootstrapError

# .cargo/config.toml of the downstream project
# wholly derived, rewritten on every run so the linker path never goes stale
def linker_config(paths, spec):
    return {
        "unstable": {
            "build-std": [ "core", "alloc" ]
        },
        "target": {
            spec.target: {
                "rustflags": [
                    "-C", "linker=" + paths.linker_bin,
                    "-C", "panic=abort",
                    "-C", "link-arg=--dump-module=llvm_dump",
                    "-C", "link-arg=--llvm-args=-bpf-stack-size=" + str(spec.stack_size),
                    "-C", "relocation-model=static",
                ]
            }
        },
        "alias": {
            "build-bpf": "build --release --target " + spec.target
        }
    }

# bootstrap.toml of the compiler checkout
def bootstrap_config(spec):
    return {
        "change-id": spec.change_id,
        "llvm": {
            # prebuilt llvm would not carry the fork's patches
            "download-ci-llvm": False,
            "ninja": True,
            "optimize": True
        }
    }

def write(fname, content):
    try:
        os.makedirs(os.path.dirname(fname), exist_ok = True)

        with open(fname, "w", encoding = "utf-8") as fp:
            fp.write(toml.dumps(content))
    except OSError as e:
        raise BootstrapError("failed to write " + fname) from e

def write_linker_config(paths, spec):
    write(paths.cargo_config, linker_config(paths, spec))

# the user owns the file once it exists
# return True if written
def write_bootstrap_config(paths, spec):
    if os.path.exists(paths.bootstrap_config):
        return False

    print("  Creating bootstrap.toml...")
    write(paths.bootstrap_config, bootstrap_config(spec))
    return True
