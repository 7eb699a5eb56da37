import io
import shutil
import sys

import pytest

from wasmpack import installer


class _Tty(io.StringIO):
    def isatty(self):
        return True


class _Pipe(io.StringIO):
    def isatty(self):
        return False


@pytest.fixture
def layout(tmp_path, monkeypatch):
    bindir = tmp_path / "bin"
    bindir.mkdir()
    rustup = bindir / "rustup"
    rustup.write_text("rustup")
    monkeypatch.setattr(shutil, "which", lambda name: str(rustup) if name == "rustup" else None)
    program = tmp_path / "wasm-pack-init"
    program.write_bytes(b"new binary")
    monkeypatch.setattr(sys, "argv", [str(program)])
    return bindir


def test_no_rustup(monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda name: None)
    with pytest.raises(installer.InstallError, match="failed to find an installation of `rustup`"):
        installer.find_destination()


def test_destination_beside_rustup(layout):
    dest = installer.find_destination()
    assert dest.parent == layout
    assert dest.name.startswith("wasm-pack")


def test_fresh_install_copies(layout):
    dest = installer.do_install([])
    assert dest.read_bytes() == b"new binary"


def test_force_overwrites(layout):
    dest = installer.find_destination()
    dest.write_bytes(b"old")
    installer.do_install(["prog", "-f"])
    assert dest.read_bytes() == b"new binary"


def test_non_tty_refuses(layout, monkeypatch):
    dest = installer.find_destination()
    dest.write_bytes(b"old")
    monkeypatch.setattr(sys, "stdin", _Pipe(""))
    with pytest.raises(installer.InstallError, match="pass `-f`"):
        installer.do_install(["prog"])
    assert dest.read_bytes() == b"old"


def test_interactive_yes(layout, monkeypatch):
    dest = installer.find_destination()
    dest.write_bytes(b"old")
    monkeypatch.setattr(sys, "stdin", _Tty("Y\n"))
    installer.do_install(["prog"])
    assert dest.read_bytes() == b"new binary"


def test_interactive_no(layout, monkeypatch):
    dest = installer.find_destination()
    dest.write_bytes(b"old")
    monkeypatch.setattr(sys, "stdin", _Tty("n\n"))
    with pytest.raises(installer.InstallError, match="aborting installation"):
        installer.confirm_can_overwrite(dest, ["prog"])


def test_install_reports_and_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr(shutil, "which", lambda name: None)
    monkeypatch.setattr(sys, "stdin", _Pipe("\n"))
    with pytest.raises(SystemExit) as info:
        installer.install([])
    assert info.value.code == 0
    assert "failed to find an installation of `rustup`" in capsys.readouterr().err