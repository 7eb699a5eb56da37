"""Build profiles, Cargo.lock versions, stamps, README copying and status output for Wasm crates."""

__version__ = "0.9.1"