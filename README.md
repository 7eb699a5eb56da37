# wasmpack

Building blocks for packaging a Rust crate compiled to WebAssembly: the
`wasm-pack` build profile settings from `Cargo.toml`, the `wasm-bindgen`
versions pinned in `Cargo.lock`, a small key-value store beside the running
program, a once-a-day check for a newer release, copying the crate's
`README.md`, status messages and self-installation next to `rustup`.

It needs Python 3.11 or later and has no third-party dependencies.

## Modules

| Module | Purpose |
| --- | --- |
| `wasmpack.progressbar` | `ProgressOutput` and `LogLevel`: `[INFO]`, `[WARN]` and `[ERR]` messages on standard error, with a quiet switch and a maximum log level. |
| `wasmpack.profile` | `BuildProfile`, `WasmPackProfile` and `WasmPackProfiles`: the `[package.metadata.wasm-pack.profile]` settings with their defaults. |
| `wasmpack.lockfile` | `Lockfile`: package versions recorded in `Cargo.lock`. |
| `wasmpack.stamps` | A JSON key-value store in a `.stamps` file beside the running program. |
| `wasmpack.version_check` | Asks crates.io for the newest `wasm-pack` version, at most once a day. |
| `wasmpack.readme` | Copies `README.md` from a crate directory into an output directory. |
| `wasmpack.installer` | Copies the running executable next to `rustup` in `PATH`. |

## Messages

```python
from wasmpack.progressbar import LogLevel, ProgressOutput

output = ProgressOutput(quiet=False, log_level=LogLevel.parse("warn"))
output.info("Compiling to Wasm...")        # not printed: below the level
output.warn("origin crate has no README")  # "[WARN]: :-) origin crate has no README"
output.error("something went wrong")       # printed even when quiet
```

`LogLevel.parse` accepts `error`, `warn` and `info` and raises `ValueError`
for anything else. Messages go to `sys.stderr` unless a `stream` is given;
the labels are shown bold and dim when that stream is a terminal.
`wasmpack.progressbar.PBAR` is the shared instance the other modules write to.

## Build profiles

```python
from wasmpack.profile import BuildProfile, WasmPackProfiles

profiles = WasmPackProfiles.from_table({"release": {"wasm-opt": ["-Oz"]}})
release = profiles.for_profile(BuildProfile.RELEASE)
print(release.wasm_opt_args())                                        # ['-Oz']
print(profiles.for_profile(BuildProfile.DEV).wasm_opt_args())         # None
print(profiles.for_profile(BuildProfile.PROFILING).wasm_opt_args())   # ['-O']
```

The table is the content of `[package.metadata.wasm-pack.profile]`. Each of
`dev`, `release` and `profiling` may set `wasm-bindgen.debug-js-glue`,
`wasm-bindgen.demangle-name-section`, `wasm-bindgen.dwarf-debug-info` and
`wasm-opt` (a boolean or a list of arguments); anything unset takes the
profile's default (`default_dev`, `default_release`, `default_profiling`).
Values of the wrong type raise `ValueError`.

## Cargo.lock

```python
from types import SimpleNamespace
from wasmpack.lockfile import Lockfile

lock = Lockfile.load(SimpleNamespace(workspace_root="path/to/workspace"))
print(lock.wasm_bindgen_version())       # e.g. '0.2.37', or None
print(lock.wasm_bindgen_test_version())
lock.require_wasm_bindgen()              # raises LockfileError when absent
```

`Lockfile.load` takes any object with a `workspace_root` attribute and reads
`Cargo.lock` there; a missing, unreadable or malformed file raises
`LockfileError`.

## Stamps

```python
from wasmpack import stamps

stamps.save_stamp_value("chromedriver_version", "79.0.3945.36")
data = stamps.read_stamps_file_to_json()
print(stamps.get_stamp_value("chromedriver_version", data))
```

The file is the running program's path (`sys.argv[0]`) with the suffix
`.stamps`. Reading a missing or invalid file, or asking for a key that is not
there, raises `StampsError`.

## Checking for a newer version

`version_check.latest_wasm_pack_version()` returns the version recorded in a
`.stamp` file beside the running program if it was written within the last
24 hours; otherwise it queries crates.io, records the time (and the version,
when the query worked) and returns the result. A failed query raises
`VersionCheckError`. `fetch_latest_wasm_pack_version()` always queries, and
`read_stamp_file_value(contents, word)` reads one value from stamp text.

## README and installation

`readme.copy_from_crate(path, out_dir)` copies `path/README.md` into
`out_dir`, prints a warning when there is none, and raises
`NotADirectoryError` when either directory is missing.

`installer.do_install()` copies the running executable to `wasm-pack` beside
`rustup` and returns the destination; an existing file is replaced only when
`-f` is among the arguments or the user answers yes at the terminal.
`installer.install()` does the same, reports any `InstallError` and exits
with status 0.

## What it does not do

This package does not read a crate's metadata from `Cargo.toml` or run
`cargo metadata`, does not write `package.json`, does not copy licence files
and does not run `npm` to pack, publish or log in. It has no command-line
entry point of its own; it is used as a library.