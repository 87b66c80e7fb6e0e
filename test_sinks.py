import io

import pytest

from planning import Move, Peg, solve
from sinks import BufferSink, FileSink, StreamSink, emit_move, emit_moves, format_move


def test_emit_move_line():
    sink = BufferSink()
    emit_move(sink, Move(3, 'A', 'C'))
    assert sink.getvalue() == "Move disk 3 from rod A to rod C\n"


def test_emit_move_with_enum_pegs():
    sink = BufferSink()
    emit_move(sink, Move(1, Peg.B, Peg.A))
    assert sink.getvalue() == "Move disk 1 from rod B to rod A\n"


def test_multi_character_labels_use_emit_string():
    assert format_move(Move(12, 'left', 'right')) == "Move disk 12 from rod left to rod right"


def test_emit_moves_counts_and_orders():
    sink = BufferSink()
    count = emit_moves(sink, solve(2, 'A', 'C', 'B'))
    assert count == 3
    assert sink.lines() == [
        "Move disk 1 from rod A to rod B",
        "Move disk 2 from rod A to rod C",
        "Move disk 1 from rod B to rod C",
    ]


def test_primitives_validate_input():
    sink = BufferSink()
    with pytest.raises(ValueError):
        sink.emit_char("AB")
    with pytest.raises(ValueError):
        sink.emit_char("")
    with pytest.raises(TypeError):
        sink.emit_int("4")
    sink.emit_char("x")
    sink.emit_int(42)
    sink.emit_string(" ok")
    assert sink.getvalue() == "x42 ok"


def test_stream_sink_defaults_to_stdout(capsys):
    sink = StreamSink()
    emit_move(sink, Move(1, 'A', 'C'))
    assert capsys.readouterr().out == "Move disk 1 from rod A to rod C\n"


def test_stream_sink_custom_stream():
    stream = io.StringIO()
    sink = StreamSink(stream)
    sink.emit_string("hello")
    assert stream.getvalue() == "hello"


def test_file_sink(tmp_path):
    path = tmp_path / "out" / "moves.txt"
    with FileSink(path) as sink:
        emit_moves(sink, solve(1, 'A', 'C', 'B'))
    assert path.read_text() == "Move disk 1 from rod A to rod C\n"

    with pytest.raises(ValueError, match="not open"):
        sink.emit_string("late")
