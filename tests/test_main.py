import os

import main
from performance_profiling.matrix_multiplication import profile_matrix_mult_all as profiler


def test_main_verification_only(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "get_cpu_info", lambda: "Test CPU")
    monkeypatch.setattr(main, "get_ram_info", lambda: "Test RAM")
    monkeypatch.setattr(profiler, "write_result_header", lambda file: None)

    exit_code = main.main(["--runs", "2", "--skip_benchmark"])

    assert exit_code == 0
    with open(os.path.join("results", "system_info.txt")) as f:
        assert "CPU: Test CPU" in f.read()
    assert "All verification runs matched the reference." in capsys.readouterr().out


def test_main_reports_mismatches(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "get_cpu_info", lambda: "Test CPU")
    monkeypatch.setattr(main, "get_ram_info", lambda: "Test RAM")
    monkeypatch.setattr(main, "run_verification_suite", lambda runs, seed: 3)

    exit_code = main.main(["--runs", "1", "--skip_benchmark"])

    assert exit_code == 1
    assert "Error: 3 verification runs did not match the reference." in capsys.readouterr().out
