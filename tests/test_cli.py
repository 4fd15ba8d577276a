import logging

import pytest

from fars.cli import main


@pytest.fixture(autouse=True)
def reset_fars_logger():
    # main() attaches a handler bound to the captured stderr of one test
    yield
    logging.getLogger("fars").handlers.clear()


def test_cli_summarize_prints_and_exports(data_dir, tmp_path, capsys):
    out_csv = tmp_path / "summary.csv"
    code = main(["--data-dir", data_dir, "summarize", "2013", "2014", "--csv", str(out_csv)])

    assert code == 0
    captured = capsys.readouterr()
    assert "2013" in captured.out and "2014" in captured.out
    # log records stay off the table output
    assert "INFO" not in captured.out
    assert "INFO" in captured.err
    assert out_csv.read_text().splitlines()[0] == "MONTH,2013,2014"


def test_cli_map_invalid_state_exit_code(data_dir, capsys):
    code = main(["--data-dir", data_dir, "map", "99", "2013", "--out", "unused.png"])
    assert code == 1
    assert "Error: invalid STATE number: 99" in capsys.readouterr().out


def test_cli_map_writes_png(data_dir, tmp_path):
    out_png = tmp_path / "map.png"
    assert main(["--data-dir", data_dir, "map", "6", "2013", "--out", str(out_png)]) == 0
    assert out_png.exists()


def test_cli_report(data_dir, tmp_path):
    pytest.importorskip("docx")
    out_docx = tmp_path / "fars.docx"
    assert main(["--data-dir", data_dir, "--workers", "2", "report", "2013", "2014", "--out", str(out_docx)]) == 0
    assert out_docx.exists()


def test_cli_requires_subcommand():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_cli_map_without_basemap(data_dir, tmp_path, basemap_calls):
    out_png = tmp_path / "map.png"
    assert main(["--data-dir", data_dir, "map", "1", "2014", "--out", str(out_png), "--no-basemap"]) == 0
    assert out_png.exists()
    assert basemap_calls == []
