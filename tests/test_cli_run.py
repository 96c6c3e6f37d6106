import json
from pathlib import Path

from apps.cli.run import main


def test_run_cli_random_sample(tmp_path: Path, capsys):
    stats = main(["--solver", "memory", "--sample", "25", "--seed", "5",
                  "--outdir", str(tmp_path), "--progress", "off"])
    assert stats["games"] == 25

    csvs = list(tmp_path.glob("run_*.csv"))
    manifests = list(tmp_path.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    header = csvs[0].read_text(encoding="utf-8").splitlines()[0].split(",")
    assert header[:5] == ["solver", "secret", "success", "guesses", "time_ms"]
    assert header[-1] == "patt_12"

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["solver_id"] == "memory"
    assert manifest["num_cases"] == 25
    assert manifest["stats"]["games"] == 25
    assert "memory: games=25" in capsys.readouterr().out


def test_run_cli_secrets_file(tmp_path: Path):
    secrets = tmp_path / "secrets.txt"
    secrets.write_text("red red blue white\nblack black black black\n", encoding="utf-8")
    stats = main(["--solver", "random_consistent", "--secrets", str(secrets),
                  "--outdir", str(tmp_path / "out"), "--progress", "off"])
    assert stats["games"] == 2
    assert stats["success_rate"] == 1.0
