import json
import subprocess
from pathlib import Path

import pytest

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rs():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert project.crates == [Crate(root_module="exercises/intro/intro1.rs")]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]
    assert project.crates[0].deps == []


@pytest.mark.parametrize(
    "path",
    ["exercises/clippy/Cargo.toml", "exercises/intro", "exercises/README.md", "a.b.rs"],
)
def test_add_path_rejects_others(path):
    project = RustAnalyzerProject()
    project.add_path(path)
    assert project.crates == []


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "quiz1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "README.md").write_text("notes\n")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    roots = {crate.root_module for crate in project.crates}
    assert roots == {
        str(Path("exercises/intro/intro1.rs")),
        str(Path("exercises/quiz1.rs")),
    }


def test_exercises_to_json_without_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    project = RustAnalyzerProject()
    project.exercises_to_json()
    assert project.crates == []


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"/opt/toolchain\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert calls == [["rustc", "--print", "sysroot"]]
    assert project.sysroot_src == str(
        Path("/opt/toolchain", "lib", "rustlib", "src", "rust", "library")
    )
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_write_to_disk_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    project = RustAnalyzerProject(sysroot_src="/src/rust")
    project.add_path("exercises/quiz1.rs")
    project.write_to_disk()
    loaded = json.loads((tmp_path / "rust-project.json").read_text())
    assert loaded == project.to_dict()
    assert loaded["crates"][0]["root_module"] == "exercises/quiz1.rs"
    assert loaded["sysroot_src"] == "/src/rust"