[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wasmpack"
version = "0.9.1"
description = "Helpers for packaging Rust crates built for WebAssembly: build profiles, Cargo.lock versions, stamps, README copying and status output"
requires-python = ">=3.11"
dependencies = []
keywords = ["wasm", "webassembly", "cargo", "packaging", "build"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wasmpack"]

[tool.pytest.ini_options]
addopts = "-ra"
