#!/usr/bin/env python3
"""sbpf-bootstrap: set up the u128 BPF toolchain and build with it."""

import argparse
import os
import sys
import toml

import workspace

from builder import Builder
from errors import BootstrapError, ConfigError
from runner import Runner
from toolchain import ToolchainSpec

CONFIG_NAME = "sbpf-bootstrap.toml"
CONFIG_SECTIONS = [ "general" ]

COMMANDS = {
    "setup": Builder.setup,
    "build-linker": Builder.setup_linker,
    "build-compiler": Builder.setup_compiler,
    "build": Builder.build_project,
}

def load_config(path, required):
    if not os.path.exists(path):
        if required:
            raise ConfigError("config file " + path + " does not exist")
        return {}

    try:
        with open(path, encoding = "utf-8") as fp:
            return toml.load(fp)
    except toml.TomlDecodeError as e:
        raise ConfigError("failed to parse " + path + ": " + str(e)) from e
    except OSError as e:
        raise ConfigError("failed to read " + path) from e

def parse_args(argv):
    parser = argparse.ArgumentParser(prog = "sbpf-bootstrap", description = "Build automation for u128 BPF prototype")
    parser.add_argument("--config", help = "TOML config (default: " + CONFIG_NAME + " in the project root)")
    parser.add_argument("--project-root", help = "downstream project directory (default: current directory)")

    sub = parser.add_subparsers(dest = "command", required = True)
    sub.add_parser("setup", help = "set up the complete toolchain (rust compiler + sbpf linker)")
    sub.add_parser("build-linker", help = "clone and build the SBPF linker only")
    sub.add_parser("build-compiler", help = "set up and build the Rust compiler with modified LLVM only")
    sub.add_parser("build", help = "build the project with the custom toolchain")

    return parser.parse_args(argv)

def make_builder(args, runner = None):
    root = workspace.project_root(args.project_root)

    if args.config:
        config = load_config(args.config, True)
    else:
        config = load_config(os.path.join(root, CONFIG_NAME), False)

    for section in config:
        if section not in CONFIG_SECTIONS:
            raise ConfigError("unknown config section [" + section + "]")

    general = config.get("general", {})

    if not isinstance(general, dict):
        raise ConfigError("[general] must be a table")

    if not isinstance(general.get("cache-dir", ""), str):
        raise ConfigError("cache-dir must be a string")

    spec = ToolchainSpec()
    paths = workspace.WorkspacePaths.locate(spec, root, general.get("cache-dir"))

    return Builder(spec, paths, runner or Runner())

def main(argv = None, runner = None):
    args = parse_args(argv)

    try:
        builder = make_builder(args, runner)
        COMMANDS[args.command](builder)
    except BootstrapError as e:
        print("error: " + str(e), file = sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file = sys.stderr)
        return 130

    return 0

if __name__ == "__main__":
    sys.exit(main())
