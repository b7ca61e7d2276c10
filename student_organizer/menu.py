"""Interactive menu for ordering student records and its command entry point."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO

from .analysis import SortStats, bubble_sort_by_grade, merge_sort_by_grade
from .generator import generate_random_input
from .records import Student, read_csv, write_csv
from .sorter import (
    sort_by_name,
    sort_by_period_semester_class_subject_name,
    sort_by_semester,
    sort_by_semester_class_period_subject_name,
    sort_by_subject_grade,
)

INPUT_FILE = "entrada.csv"
OUTPUT_FILE = "saida.csv"
BUBBLE_OUTPUT_FILE = "saida_bubble.csv"
MERGE_OUTPUT_FILE = "saida_merge.csv"

EXIT_OPTION = 9

MENU_TEXT = (
    "\nMenu de Ordenação\n"
    "1 - Ordenar por Nome\n"
    "2 - Ordenar por Semestre\n"
    "3 - Ordenar por Semestre, Turma, Período, Disciplina e Nome\n"
    "4 - Ordenar por Disciplina e Média Final (decrescente)\n"
    "5 - Ordenar por Período, Semestre, Turma, Disciplina e Nome\n"
    "6 - Gerar entrada aleatória\n"
    "7 - Ordenar por nota (Bubble Sort)\n"
    "8 - Ordenar por nota (Merge Sort)\n"
    "9 - Sair\n"
)

_INTEGER = re.compile(r"\s*[+-]?\d+")


def _read_int(stdin: TextIO) -> Optional[int]:
    """Read a line and return the integer it starts with, if any.

    Raises ``EOFError`` when the input is exhausted.
    """
    line = stdin.readline()
    if not line:
        raise EOFError
    match = _INTEGER.match(line)
    return int(match.group()) if match else None


def _save(path: str, students: list[Student], stdout: TextIO) -> None:
    try:
        write_csv(path, students)
    except OSError:
        print("Erro ao abrir o arquivo para escrita.", file=sys.stderr)
        return
    print(f"Dados salvos no arquivo {path}.", file=stdout)


def _report(name: str, size: int, stats: SortStats, stdout: TextIO) -> None:
    print(
        f"Algoritmo: {name}\n"
        f"Tamanho da entrada: {size}\n"
        f"Tempo: {stats.elapsed:.4f}s\n"
        f"Comparações: {stats.comparisons}",
        file=stdout,
    )


_PLAIN_SORTS: dict[int, Callable[[list[Student]], None]] = {
    1: sort_by_name,
    2: sort_by_semester,
    3: sort_by_semester_class_period_subject_name,
    4: sort_by_subject_grade,
    5: sort_by_period_semester_class_subject_name,
}

_TIMED_SORTS: dict[int, tuple[str, Callable[[list[Student]], SortStats], str]] = {
    7: ("Bubble Sort", bubble_sort_by_grade, BUBBLE_OUTPUT_FILE),
    8: ("Merge Sort", merge_sort_by_grade, MERGE_OUTPUT_FILE),
}


def run_menu(
    students: list[Student],
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> bool:
    """Show the menu until a valid option is chosen and carry it out.

    Returns ``False`` when the user chose to leave (or input ran out) and
    ``True`` when another round should follow.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(MENU_TEXT)
        stdout.write("Escolha uma opção: ")
        stdout.flush()
        try:
            option = _read_int(stdin)
        except EOFError:
            return False

        if option in _PLAIN_SORTS:
            _PLAIN_SORTS[option](students)
            if option == 3:
                print(
                    "Ordenação por semestre, turma, período, disciplina e nome concluída.",
                    file=stdout,
                )
            _save(OUTPUT_FILE, students, stdout)
            return True

        if option == 6:
            stdout.write("Quantidade de alunos para gerar: ")
            stdout.flush()
            try:
                count = _read_int(stdin)
            except EOFError:
                count = None
            count = count if count is not None else 0
            try:
                generate_random_input(INPUT_FILE, count)
            except OSError as error:
                print(
                    f"Erro ao criar arquivo CSV aleatório: {error.strerror or error}",
                    file=sys.stderr,
                )
            else:
                print(
                    f"Arquivo '{INPUT_FILE}' gerado com {count} alunos.", file=stdout
                )
            return True

        if option in _TIMED_SORTS:
            name, sort, path = _TIMED_SORTS[option]
            stats = sort(students)
            _save(path, students, stdout)
            _report(name, len(students), stats, stdout)
            return True

        if option == EXIT_OPTION:
            print("Encerrando...", file=stdout)
            return False

        print("Opção inválida.", file=stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Reload the input file and show the menu until the user leaves."""
    del argv
    keep_going = True
    while keep_going:
        try:
            students = read_csv(INPUT_FILE)
        except (OSError, ValueError):
            print(
                f"Aviso: Não foi possível carregar os dados de '{INPUT_FILE}'.",
                file=sys.stdout,
            )
            students = []
        keep_going = run_menu(students)
    return 0