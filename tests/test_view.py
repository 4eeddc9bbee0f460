from student_records.view import ConsoleView


def test_build_table_aligns_columns(roster):
    text = ConsoleView().build_table("SUCHERGEBNIS", roster)
    lines = text.splitlines()

    assert lines[0] == "=== SUCHERGEBNIS ==="
    assert lines[1].startswith("Name   │ ID │ E-Mail")
    assert len(lines) == 3 + len(roster)
    assert "17/05/1999" in lines[3]
    assert len({len(line) for line in lines[1:]}) == 1


def test_render_report_prints_lines(capsys, ann):
    ConsoleView().render_report([ann.report_line()])
    out = capsys.readouterr().out
    assert out == "Studentendaten:\n" + ann.report_line() + "\n"
