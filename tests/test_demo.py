import importlib.util
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(os.path.join(ROOT, "src", "py"))


def _load_demo():
    spec = importlib.util.spec_from_file_location("render_sweep", os.path.join(ROOT, "demo", "render_sweep.py"))
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_render_sweep_writes_json_and_gif(tmp_path, monkeypatch):
    maps_dir = tmp_path / "maps"
    maps_dir.mkdir()
    (maps_dir / "corridor.txt").write_text("...\n.x.\n")
    (maps_dir / "notes.md").write_text("not a map\n")
    out_dir = tmp_path / "out"

    demo = _load_demo()
    monkeypatch.setattr(
        sys, "argv", ["render_sweep.py", "--maps_dir", str(maps_dir), "--out_dir", str(out_dir), "--duration", "50"]
    )
    demo.main()

    assert sorted(os.listdir(out_dir)) == ["corridor.gif", "corridor.json"]
