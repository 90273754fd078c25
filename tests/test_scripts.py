import importlib.util
from pathlib import Path

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_render_examples_writes_to_screenshot_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SCREENSHOT_DIR", str(tmp_path))
    script = _load_script("render_examples")

    assert script.main() == 0
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "example-big-off.png",
        "example-big-on.png",
        "example-off.png",
        "example-on.png",
    ]


def test_render_examples_reports_failure(tmp_path, monkeypatch):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    monkeypatch.setenv("SCREENSHOT_DIR", str(blocker))
    script = _load_script("render_examples")

    assert script.main() == 1


def test_generate_gamma_chart(tmp_path, monkeypatch):
    monkeypatch.setenv("SCREENSHOT_DIR", str(tmp_path))
    script = _load_script("generate_gamma_chart")

    assert script.main() == 0
    assert (tmp_path / "gamma.png").exists()
