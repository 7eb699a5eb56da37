import pytest

from wasmpack.profile import BuildProfile, WasmPackProfile, WasmPackProfiles


def test_defaults_when_table_missing():
    profiles = WasmPackProfiles.from_table(None)
    assert profiles.dev == WasmPackProfile.default_dev()
    assert profiles.release == WasmPackProfile.default_release()
    assert profiles.profiling == WasmPackProfile.default_profiling()


def test_dev_defaults():
    dev = WasmPackProfile.default_dev()
    assert dev.debug_js_glue is True
    assert dev.demangle_name_section is True
    assert dev.dwarf_debug_info is False
    assert dev.wasm_opt_args() is None


def test_release_defaults_run_wasm_opt():
    release = WasmPackProfile.default_release()
    assert release.debug_js_glue is False
    assert release.wasm_opt_args() == ["-O"]


def test_partial_override_keeps_defaults():
    profile = WasmPackProfile.from_table(
        {"wasm-bindgen": {"dwarf-debug-info": True}}, WasmPackProfile.default_dev()
    )
    assert profile.dwarf_debug_info is True
    assert profile.debug_js_glue is True
    assert profile.demangle_name_section is True


def test_explicit_wasm_opt_args():
    profiles = WasmPackProfiles.from_table({"release": {"wasm-opt": ["-Oz", "--enable-mutable-globals"]}})
    assert profiles.release.wasm_opt_args() == ["-Oz", "--enable-mutable-globals"]


def test_wasm_opt_disabled():
    profiles = WasmPackProfiles.from_table({"release": {"wasm-opt": False}})
    assert profiles.release.wasm_opt_args() is None


def test_wasm_opt_enabled_for_dev():
    profiles = WasmPackProfiles.from_table({"dev": {"wasm-opt": True}})
    assert profiles.dev.wasm_opt_args() == ["-O"]


def test_empty_args_list_is_kept():
    profiles = WasmPackProfiles.from_table({"release": {"wasm-opt": []}})
    assert profiles.release.wasm_opt_args() == []


def test_bad_wasm_opt_type():
    with pytest.raises(ValueError):
        WasmPackProfiles.from_table({"release": {"wasm-opt": 3}})


def test_bad_bindgen_type():
    with pytest.raises(ValueError):
        WasmPackProfile.from_table(
            {"wasm-bindgen": {"debug-js-glue": "yes"}}, WasmPackProfile.default_dev()
        )


@pytest.mark.parametrize("profile", list(BuildProfile))
def test_for_profile(profile):
    profiles = WasmPackProfiles.from_table({})
    assert profiles.for_profile(profile) is getattr(profiles, profile.value)