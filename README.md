# student-organizer

An interactive console tool for organising student grade records kept in a CSV
file. The menu and its messages are in Portuguese.

## Input format

Records are read from `entrada.csv` in the current directory. Each line has six
comma-separated fields and no header:

```
semester,class,period,name,subject,final_grade
```

For example:

```
2021,A,N,Alice,matematica,8.50
2019,B,M,Bruno,portugues,6.75
```

The class and the period are single characters. The name and the subject are
each 1 to 49 characters with no comma. Blank lines are skipped. A line that does
not hold a record makes `read_csv` raise `ValueError`. A file that cannot be
opened raises `OSError`. Grades are stored at single precision.

## Output format

Output files begin with the header line

```
Nome, Semestre, Turma, Periodo, Disciplina, Media Final
```

followed by one line per record:

```
name, semester, class, period, subject, grade
```

The class and the period are written as their character codes, so `A` becomes
`65`. The grade is written with two decimals. Output files therefore do not use
the input format.

## Running

```
pip install .
student-organizer
```

On every round the tool loads `entrada.csv`. If the file is missing or malformed
it prints a warning and continues with no records. It then shows this menu:

1. Sort by name
2. Sort by semester
3. Sort by semester, class, period, subject and name
4. Sort by subject, then by final grade from highest to lowest
5. Sort by period, semester, class, subject and name
6. Generate random input. This asks for a count and overwrites `entrada.csv`.
7. Sort by grade with bubble sort, then report the processor time taken and the number of comparisons
8. Sort by grade with merge sort, then report the processor time taken and the number of comparisons
9. Quit

Choices 1 to 5 write the result to `saida.csv`. Choice 7 writes to
`saida_bubble.csv` and choice 8 writes to `saida_merge.csv`.

An unknown choice prints a message and shows the menu again. After a valid
action the tool starts a new round and loads `entrada.csv` again. The tool stops
on choice 9 or when input runs out.

## Library use

```python
from student_organizer.records import Student, read_csv, write_csv
from student_organizer.sorter import sort_by_subject_grade
from student_organizer.analysis import merge_sort_by_grade

students = read_csv("entrada.csv")
sort_by_subject_grade(students)
write_csv("saida.csv", students)

stats = merge_sort_by_grade(students)
print(stats.comparisons, stats.elapsed)
```

- `student_organizer.records`: the `Student` dataclass, with the fields
  `semester`, `section`, `period`, `name`, `subject` and `final_grade`. Also
  `read_csv(path)` and `write_csv(path, students)`.
- `student_organizer.sorter`: the following in-place orderings:
  - `sort_by_name`
  - `sort_by_semester`
  - `sort_by_semester_class_period_subject_name`
  - `sort_by_subject_grade`
  - `sort_by_period_semester_class_subject_name`

  They use an exchange sort. Records with equal keys may change their relative
  order.
- `student_organizer.analysis`: `bubble_sort_by_grade(students)` and
  `merge_sort_by_grade(students)`. Both sort in place by ascending grade and
  return a `SortStats` with `elapsed` (processor seconds) and `comparisons`.
  The merge sort is stable.
- `student_organizer.generator`: `generate_random_input(path, count, rng=None)`
  writes `count` random records in the input format to `path`. The records
  have years 2010 to 2023, class `A`, period `N`, names `Aluno<n>`, one of three
  subjects, and grades from 0 to 10. Pass a `random.Random` as `rng` for
  reproducible output.
- `student_organizer.menu`: `run_menu(students, stdin=None, stdout=None)` runs
  one round of the menu. `main()` is the command entry point.

## Tests

```
pip install .[test]
pytest
```