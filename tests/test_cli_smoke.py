import csv
from pathlib import Path

import pytest
from apps.cli import run, run_multi
from wordlepop.solvers import REGISTRY, ExhaustedCandidates
from wordlepop.solvers.popularity import PopularitySolver


def test_run_cli_writes_reports(tmp_path: Path, capsys):
    rc = run.main(["--sample", "5", "--outdir", str(tmp_path), "--progress", "off"])
    assert rc == 0
    assert len(list(tmp_path.glob("run_*.csv"))) == 1
    assert len(list(tmp_path.glob("run_*_manifest.json"))) == 1
    out = capsys.readouterr().out
    assert "popularity:" in out and "OK" in out


def test_run_cli_missing_wordlist_is_fatal(tmp_path: Path):
    with pytest.raises(SystemExit):
        run.main(["--wordlist", str(tmp_path / "missing.txt"), "--outdir", str(tmp_path)])


def test_run_multi_compares_solvers(tmp_path: Path, capsys):
    rc = run_multi.main(["--sample", "3", "--outdir", str(tmp_path)])
    assert rc == 0
    assert (tmp_path / "popularity").is_dir() and (tmp_path / "adaptive_popularity").is_dir()
    assert "adaptive_popularity" in capsys.readouterr().out


class _ExhaustingSolver(PopularitySolver):
    """Plays the opener, then gives up as if filtering emptied the pool."""
    id = "exhausting"

    def pick_next_guess(self, previous):
        if not previous.is_first_turn:
            raise ExhaustedCandidates("No remaining words to choose from")
        return super().pick_next_guess(previous)


@pytest.fixture
def exhausting_setup(tmp_path: Path, monkeypatch):
    monkeypatch.setitem(REGISTRY, _ExhaustingSolver.id, _ExhaustingSolver)
    wl = tmp_path / "wordle.txt"
    wl.write_text("crane\nslate\ntrace\n", encoding="utf-8")
    return wl, tmp_path / "out"


def _rows(path: Path):
    with path.open(newline="", encoding="utf-8") as f:
        return {r["answer"]: r for r in csv.DictReader(f)}


def test_run_cli_records_failed_games(exhausting_setup):
    wl, out = exhausting_setup
    rc = run.main(["--solver", "exhausting", "--wordlist", str(wl), "--outdir", str(out),
                   "--progress", "off"])
    assert rc == 0
    rows = _rows(next(out.glob("run_*.csv")))
    assert rows["crane"]["success"] == "True" and rows["crane"]["error"] == ""
    assert rows["slate"]["success"] == "False"
    assert "No remaining words" in rows["slate"]["error"]


def test_run_multi_keeps_going_after_failed_games(exhausting_setup):
    wl, out = exhausting_setup
    rc = run_multi.main(["--solvers", "exhausting", "popularity", "--wordlist", str(wl),
                         "--outdir", str(out), "--progress", "off"])
    assert rc == 0
    rows = _rows(next((out / "exhausting").glob("run_*.csv")))
    assert "No remaining words" in rows["trace"]["error"]
    # the solver after the failing one still gets its reports
    assert len(list((out / "popularity").glob("run_*.csv"))) == 1


@pytest.mark.parametrize("cli,argv", [
    (run, ["--progress", "off"]),
    (run_multi, ["--progress", "off"]),
])
def test_wordlist_without_valid_words_is_fatal(tmp_path: Path, cli, argv):
    wl = tmp_path / "wordle.txt"
    wl.write_text("toolong\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main(argv + ["--wordlist", str(wl), "--outdir", str(tmp_path)])
    assert "no valid" in str(exc.value)


def test_run_multi_auto_progress_is_quiet_without_tty(tmp_path: Path, capsys):
    # captured stderr is not a terminal, so "auto" must not draw a bar
    rc = run_multi.main(["--solvers", "popularity", "--sample", "2", "--outdir", str(tmp_path)])
    assert rc == 0
    err = capsys.readouterr().err
    assert "%|" not in err and "game/s" not in err
