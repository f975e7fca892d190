import io
import sys

from scripts import run_examples
from scripts.generate_instances import generate_random_lp, read_jsonl, write_jsonl
from simplex_tableau.schemas import LPProblem


def run_main(monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, "argv", ["run_examples.py", *args])
    run_examples.main()
    return capsys.readouterr().out


def test_fixed_problems_report_solutions_and_statuses(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys)
    blocks = [block for block in out.split("------------------------------\n") if block.strip()]

    assert len(blocks) == 6
    assert blocks[0].startswith("Test 1:\n")
    assert "Solution: [0.0, 8.0, 20.0]\nOptimal Value: 400.0\n" in blocks[0]
    assert "Unbounded solution\n" in blocks[1]
    assert "Solution: [8.0, 6.0]\nOptimal Value: 20.0\n" in blocks[2]
    assert "Solution: [1.0, 4.0]\nOptimal Value: 19.0\n" in blocks[3]
    assert "Solution: [3.0, 1.5]\nOptimal Value: 21.0\n" in blocks[4]
    assert blocks[5].startswith("examples/textbook_lp.json:\n")


def test_instances_file_is_solved_too(monkeypatch, capsys, tmp_path):
    stalled = LPProblem(
        name="stalled",
        objective=[3, 2, 1],
        constraints=[[1, 0, 0], [1, 1, 0], [0, 0, 1]],
        rhs=[2, 2, 5],
    )
    path = tmp_path / "extra.jsonl"
    with path.open("w") as fh:
        write_jsonl([stalled], fh)

    out = run_main(monkeypatch, capsys, "--instances", str(path))

    assert "stalled:\nThe method is not applicable!\n" in out


def test_jsonl_round_trip_keeps_problems():
    problems = [generate_random_lp(2, 3, seed) for seed in range(3)]
    buffer = io.StringIO()
    write_jsonl(problems, buffer)

    assert buffer.getvalue().count("\n") == 3

    tmp = buffer.getvalue()
    parsed = [LPProblem.model_validate_json(line) for line in tmp.splitlines()]
    assert parsed == problems


def test_read_jsonl_skips_blank_lines(tmp_path):
    path = tmp_path / "one.jsonl"
    path.write_text(generate_random_lp(2, 2, 7).model_dump_json() + "\n\n")

    assert read_jsonl(path) == [generate_random_lp(2, 2, 7)]
