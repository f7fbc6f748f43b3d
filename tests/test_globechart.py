from colorglobe.globechart import main


def test_main_writes_png(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("GLOBE_TOTAL_DOTS", "GLOBE_SEED", "LOG_LEVEL", "APP_LANG"):
        monkeypatch.delenv(name, raising=False)
    out = tmp_path / "globe.png"
    path = main(
        ["--dots", "20", "--seed", "1", "--progress", "0.25", "--color", "cyan", "--output", str(out)]
    )
    assert path == out
    assert out.stat().st_size > 0
