"""Student records and their CSV input and output formats."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Union

PathArg = Union[str, "PathLike[str]"]

OUTPUT_HEADER = "Nome, Semestre, Turma, Periodo, Disciplina, Media Final"
MAX_FIELD_LENGTH = 49

_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_LINE = re.compile(
    r"\s*([+-]?\d+),(.),(.),"
    rf"([^,]{{1,{MAX_FIELD_LENGTH}}}),([^,]{{1,{MAX_FIELD_LENGTH}}}),"
    rf"\s*({_FLOAT})"
)


def _single_precision(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class Student:
    """One student's result in one subject."""

    semester: int
    section: str
    period: str
    name: str
    subject: str
    final_grade: float

    def __post_init__(self) -> None:
        for label, value in (("section", self.section), ("period", self.period)):
            if len(value) != 1:
                raise ValueError(f"{label} must be a single character, got {value!r}")
        # Grades are kept at single precision so that ties and rounding
        # behave the same as in the stored format.
        self.final_grade = _single_precision(float(self.final_grade))


def _parse_line(line: str, line_number: int) -> Student:
    match = _LINE.match(line)
    if match is None:
        raise ValueError(f"line {line_number}: malformed record {line.rstrip()!r}")
    semester, section, period, name, subject, grade = match.groups()
    return Student(
        semester=int(semester),
        section=section,
        period=period,
        name=name,
        subject=subject,
        final_grade=float(grade),
    )


def read_csv(path: PathArg) -> list[Student]:
    """Read records of the form ``semester,section,period,name,subject,grade``.

    Blank lines are skipped. Raises ``OSError`` if the file cannot be opened
    and ``ValueError`` for a line that does not hold a record.
    """
    with open(path, encoding="utf-8") as handle:
        return [
            _parse_line(line, number)
            for number, line in enumerate(handle, start=1)
            if line.strip()
        ]


def _format_row(student: Student) -> str:
    return (
        f"{student.name}, {student.semester}, {ord(student.section)}, "
        f"{ord(student.period)}, {student.subject}, {student.final_grade:.2f}"
    )


def write_csv(path: PathArg, students: Iterable[Student]) -> None:
    """Write the records with a header line, one record per line.

    Section and period are written as their character codes.
    """
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(OUTPUT_HEADER + "\n")
        for student in students:
            handle.write(_format_row(student) + "\n")