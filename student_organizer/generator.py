"""Generation of random student input files."""

from __future__ import annotations

import random
from typing import Optional

from .records import PathArg

SUBJECTS = ("matematica", "portugues", "geografia")
FIRST_YEAR = 2010
YEAR_SPAN = 14
NAME_NUMBER_LIMIT = 10000
MAX_GRADE = 10.0


def generate_random_input(
    path: PathArg, count: int, rng: Optional[random.Random] = None
) -> None:
    """Write ``count`` random records in the input format to ``path``.

    A count of zero or less yields an empty file.
    """
    rng = rng if rng is not None else random.Random()
    with open(path, "w", encoding="utf-8") as handle:
        for _ in range(count):
            year = FIRST_YEAR + rng.randrange(YEAR_SPAN)
            name = f"Aluno{rng.randrange(NAME_NUMBER_LIMIT)}"
            subject = rng.choice(SUBJECTS)
            grade = rng.uniform(0.0, MAX_GRADE)
            handle.write(f"{year},A,N,{name},{subject},{grade:.2f}\n")