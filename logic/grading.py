# Student grade report processing

import logging
import re
from pathlib import Path

from data.errors import InvalidFormatError, MissingFieldError
from data.models import Student

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")

DEMO_LINES = [
    "101,Alice Smith,84",
    "102,John Mensah,73",
    "103,Ama Owusu,58",
    "104,Kofi Asare,47",
]


def _parse_int(text):
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def parse_student_line(line, line_no=1):
    """
    Parses an ``id,full name,score`` record into a Student.

    Raises MissingFieldError when fewer than three fields are present and
    InvalidFormatError when the id or the score is not an integer.
    """
    parts = [part.strip() for part in line.split(",")]
    if len(parts) < 3:
        raise MissingFieldError(f"Line {line_no}: Expected 3 fields (Id, FullName, Score). Got {len(parts)}.")

    student_id = _parse_int(parts[0])
    if student_id is None:
        raise InvalidFormatError(f"Line {line_no}: Invalid ID '{parts[0]}'.")

    score = _parse_int(parts[2])
    if score is None:
        raise InvalidFormatError(f"Line {line_no}: Score '{parts[2]}' is not an integer.")

    return Student(student_id, parts[1], score)


def read_students(lines):
    """
    Parses every non-blank line, stopping at the first malformed one.
    """
    students = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        students.append(parse_student_line(line.rstrip("\r\n"), line_no))
    return students


def read_students_from_file(input_path):
    try:
        with open(input_path, encoding="utf-8") as f:
            students = read_students(f)
    except UnicodeDecodeError as e:
        raise InvalidFormatError(f"'{input_path}' is not valid UTF-8 text: {e.reason}.") from e
    logger.info("Read %d students from %s", len(students), input_path)
    return students


def write_report(students, output_path):
    with open(output_path, "w", encoding="utf-8") as f:
        for student in students:
            f.write(f"{student}\n")
    logger.info("Wrote report for %d students to %s", len(students), output_path)


def write_demo_input(input_path):
    Path(input_path).write_text("\n".join(DEMO_LINES) + "\n", encoding="utf-8")
