import io

import pytest

from student_organizer.analysis import bubble_sort_by_grade, merge_sort_by_grade
from student_organizer.menu import main, run_menu
from student_organizer.records import OUTPUT_HEADER, Student, read_csv


def _students():
    return [
        Student(2012, "A", "N", "Carla", "portugues", 7.5),
        Student(2010, "A", "N", "Bruno", "matematica", 9.0),
        Student(2011, "A", "N", "Ana", "matematica", 6.25),
    ]


def _run(students, text):
    out = io.StringIO()
    result = run_menu(students, io.StringIO(text), out)
    return result, out.getvalue()


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_sort_by_name_writes_output(tmp_path):
    students = _students()
    result, out = _run(students, "1\n")
    assert result is True
    assert [s.name for s in students] == ["Ana", "Bruno", "Carla"]
    lines = (tmp_path / "saida.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0] == OUTPUT_HEADER
    assert [line.split(",")[0] for line in lines[1:]] == ["Ana", "Bruno", "Carla"]
    assert "Dados salvos no arquivo saida.csv." in out


def test_sort_by_semester():
    students = _students()
    result, _ = _run(students, "2\n")
    assert result is True
    assert [s.semester for s in students] == [2010, 2011, 2012]


def test_option_three_prints_completion():
    students = _students()
    _, out = _run(students, "3\n")
    assert "Ordenação por semestre, turma, período, disciplina e nome concluída." in out
    assert [s.semester for s in students] == [2010, 2011, 2012]


def test_subject_then_grade_descending():
    students = _students()
    _run(students, "4\n")
    assert [s.name for s in students] == ["Bruno", "Ana", "Carla"]


def test_invalid_then_exit():
    result, out = _run(_students(), "42\n9\n")
    assert result is False
    assert "Opção inválida." in out
    assert "Encerrando..." in out


def test_non_numeric_input_is_invalid():
    result, out = _run(_students(), "abc\n9\n")
    assert result is False
    assert out.count("Opção inválida.") == 1


def test_end_of_input_stops():
    result, _ = _run(_students(), "")
    assert result is False


def test_generate_random_input(tmp_path):
    result, out = _run([], "6\n5\n")
    assert result is True
    assert "Arquivo 'entrada.csv' gerado com 5 alunos." in out
    assert len(read_csv(tmp_path / "entrada.csv")) == 5


def test_bubble_option_reports_stats(tmp_path):
    expected = bubble_sort_by_grade(_students()).comparisons
    students = _students()
    result, out = _run(students, "7\n")
    assert result is True
    assert "Algoritmo: Bubble Sort" in out
    assert "Tamanho da entrada: 3" in out
    assert f"Comparações: {expected}" in out
    grades = [s.final_grade for s in students]
    assert grades == sorted(grades)
    assert (tmp_path / "saida_bubble.csv").exists()


def test_merge_option_reports_stats(tmp_path):
    expected = merge_sort_by_grade(_students()).comparisons
    students = _students()
    _, out = _run(students, "8\n")
    assert "Algoritmo: Merge Sort" in out
    assert f"Comparações: {expected}" in out
    lines = (tmp_path / "saida_merge.csv").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 4


def test_main_without_input_warns(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Aviso: Não foi possível carregar os dados de 'entrada.csv'." in out
    assert "Encerrando..." in out


def test_main_loads_input_and_loops(tmp_path, monkeypatch, capsys):
    (tmp_path / "entrada.csv").write_text(
        "2012,A,N,Carla,portugues,7.50\n2010,A,N,Bruno,matematica,9.00\n",
        encoding="utf-8",
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n9\n"))
    assert main() == 0
    lines = (tmp_path / "saida.csv").read_text(encoding="utf-8").splitlines()
    assert [line.split(",")[0] for line in lines[1:]] == ["Bruno", "Carla"]
    assert "Aviso" not in capsys.readouterr().out