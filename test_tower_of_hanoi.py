"""
Tests for the move printer entry point.
"""

import pytest

from config import SolverConfig
from sinks import BufferSink
from tower_of_hanoi import main, run

FOUR_DISK_LINES = [
    "Move disk 1 from rod A to rod B",
    "Move disk 2 from rod A to rod C",
    "Move disk 1 from rod B to rod C",
    "Move disk 3 from rod A to rod B",
    "Move disk 1 from rod C to rod A",
    "Move disk 2 from rod C to rod B",
    "Move disk 1 from rod A to rod B",
    "Move disk 4 from rod A to rod C",
    "Move disk 1 from rod B to rod C",
    "Move disk 2 from rod B to rod A",
    "Move disk 1 from rod C to rod A",
    "Move disk 3 from rod B to rod C",
    "Move disk 1 from rod A to rod B",
    "Move disk 2 from rod A to rod C",
    "Move disk 1 from rod B to rod C",
]


def test_default_run_prints_four_disk_solution(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == FOUR_DISK_LINES
    assert out.endswith("\n")


def test_iterative_flag_same_output(capsys):
    main([])
    recursive_out = capsys.readouterr().out
    main(["--iterative"])
    assert capsys.readouterr().out == recursive_out


def test_custom_pegs_and_disks(capsys):
    main(["--num-disks", "2", "--source", "X", "--target", "Y", "--auxiliary", "Z"])
    assert capsys.readouterr().out.splitlines() == [
        "Move disk 1 from rod X to rod Z",
        "Move disk 2 from rod X to rod Y",
        "Move disk 1 from rod Z to rod Y",
    ]


def test_zero_disks_prints_nothing(capsys):
    assert main(["--num-disks", "0"]) == 0
    assert capsys.readouterr().out == ""


def test_count_only(capsys):
    main(["--num-disks", "10", "--count-only"])
    assert capsys.readouterr().out == "1023\n"


def test_output_file(tmp_path, capsys):
    path = tmp_path / "moves.txt"
    main(["--output", str(path)])
    assert capsys.readouterr().out == ""
    assert path.read_text().splitlines() == FOUR_DISK_LINES


def test_negative_disks_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--num-disks", "-1"])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "num_disks must be >= 0" in captured.err


def test_duplicate_pegs_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--source", "A", "--target", "A"])
    assert exc.value.code == 2
    assert "Pegs must be distinct" in capsys.readouterr().err


def test_long_peg_label_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--source", "AB"])
    assert exc.value.code == 2


def test_run_with_states():
    sink = BufferSink()
    count = run(SolverConfig(num_disks=2, show_states=True), sink)
    assert count == 3
    # Labels list disks largest first; digits follow source, auxiliary, target
    assert sink.lines() == [
        "Move disk 1 from rod A to rod B",
        "  state 12",
        "Move disk 2 from rod A to rod C",
        "  state 32",
        "Move disk 1 from rod B to rod C",
        "  state 33",
    ]


def test_bad_arguments_leave_output_file_alone(tmp_path, capsys):
    path = tmp_path / "moves.txt"
    path.write_text("previous run\n")
    with pytest.raises(SystemExit) as exc:
        main(["--num-disks", "-1", "--output", str(path)])
    assert exc.value.code == 2
    assert path.read_text() == "previous run\n", "Existing output was overwritten"

    with pytest.raises(SystemExit):
        main(["--source", "B", "--target", "B", "--output", str(path)])
    assert path.read_text() == "previous run\n"


def test_states_use_abc_digits_for_reordered_pegs():
    sink = BufferSink()
    run(SolverConfig(num_disks=2, source="C", target="A", auxiliary="B", show_states=True), sink)
    # Digit 1 is always rod A, 2 rod B, 3 rod C
    assert sink.lines() == [
        "Move disk 1 from rod C to rod B",
        "  state 32",
        "Move disk 2 from rod C to rod A",
        "  state 12",
        "Move disk 1 from rod B to rod A",
        "  state 11",
    ]


def test_states_for_other_labels_follow_source_auxiliary_target():
    sink = BufferSink()
    run(SolverConfig(num_disks=1, source="X", target="Y", auxiliary="Z", show_states=True), sink)
    assert sink.lines() == ["Move disk 1 from rod X to rod Y", "  state 3"]
