"""Per-profile build settings from ``[package.metadata.wasm-pack.profile]``."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

_BINDGEN_KEYS = {
    "debug-js-glue": "debug_js_glue",
    "demangle-name-section": "demangle_name_section",
    "dwarf-debug-info": "dwarf_debug_info",
}


class BuildProfile(enum.Enum):
    """The build profile a crate is compiled with."""

    DEV = "dev"
    RELEASE = "release"
    PROFILING = "profiling"


def _as_table(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"invalid type for `{what}`: expected a table")
    return value


def _parse_wasm_opt(value: Any) -> bool | tuple[str, ...]:
    if isinstance(value, bool):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError("`wasm-opt` must be a boolean or a list of strings")


@dataclass(frozen=True)
class WasmPackProfile:
    """Settings for wasm-bindgen and wasm-opt in one profile."""

    debug_js_glue: bool
    demangle_name_section: bool
    dwarf_debug_info: bool
    wasm_opt: bool | tuple[str, ...] | None = None

    @classmethod
    def default_dev(cls) -> "WasmPackProfile":
        return cls(debug_js_glue=True, demangle_name_section=True, dwarf_debug_info=False)

    @classmethod
    def default_release(cls) -> "WasmPackProfile":
        return cls(
            debug_js_glue=False,
            demangle_name_section=True,
            dwarf_debug_info=False,
            wasm_opt=True,
        )

    @classmethod
    def default_profiling(cls) -> "WasmPackProfile":
        return cls.default_release()

    @classmethod
    def from_table(cls, table: Any, defaults: "WasmPackProfile") -> "WasmPackProfile":
        """Read a profile table, taking unset values from ``defaults``."""
        table = _as_table(table, "profile")
        bindgen = _as_table(table.get("wasm-bindgen"), "wasm-bindgen")
        changes: dict[str, Any] = {}
        for key, attr in _BINDGEN_KEYS.items():
            if key in bindgen:
                value = bindgen[key]
                if not isinstance(value, bool):
                    raise ValueError(f"invalid type for `wasm-bindgen.{key}`: expected a boolean")
                changes[attr] = value
        if "wasm-opt" in table:
            changes["wasm_opt"] = _parse_wasm_opt(table["wasm-opt"])
        return replace(defaults, **changes)

    def wasm_opt_args(self) -> list[str] | None:
        """Arguments for ``wasm-opt``, or ``None`` when it is disabled."""
        if self.wasm_opt is None or self.wasm_opt is False:
            return None
        if self.wasm_opt is True:
            return ["-O"]
        return list(self.wasm_opt)


@dataclass(frozen=True)
class WasmPackProfiles:
    """The dev, release and profiling profiles of a crate."""

    dev: WasmPackProfile
    release: WasmPackProfile
    profiling: WasmPackProfile

    @classmethod
    def from_table(cls, table: Any) -> "WasmPackProfiles":
        """Read the ``profile`` table; missing profiles take their defaults."""
        table = _as_table(table, "profile")
        return cls(
            dev=WasmPackProfile.from_table(table.get("dev"), WasmPackProfile.default_dev()),
            release=WasmPackProfile.from_table(table.get("release"), WasmPackProfile.default_release()),
            profiling=WasmPackProfile.from_table(
                table.get("profiling"), WasmPackProfile.default_profiling()
            ),
        )

    def for_profile(self, profile: BuildProfile) -> WasmPackProfile:
        """The settings for ``profile``."""
        return {
            BuildProfile.DEV: self.dev,
            BuildProfile.RELEASE: self.release,
            BuildProfile.PROFILING: self.profiling,
        }[BuildProfile(profile)]