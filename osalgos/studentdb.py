"""A student database kept as fixed-size binary records in one file."""

from __future__ import annotations

import argparse
import os
import struct
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

NAME_SIZE = 50
_RECORD = struct.Struct(f"<i{NAME_SIZE}s2xi")
RECORD_SIZE = _RECORD.size


class RecordNotFoundError(LookupError):
    """No record has the requested roll number."""

    def __init__(self, roll: int):
        super().__init__("Record not found.")
        self.roll = roll


@dataclass(frozen=True)
class Student:
    """One student record."""

    roll: int
    name: str
    marks: int

    def to_bytes(self) -> bytes:
        """Encode as a fixed-size record with a NUL-terminated name field."""
        encoded = self.name.encode("utf-8")
        if b"\0" in encoded or len(encoded) >= NAME_SIZE:
            raise ValueError(f"name must be shorter than {NAME_SIZE} bytes, without NUL")
        try:
            return _RECORD.pack(self.roll, encoded, self.marks)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Student:
        """Decode one fixed-size record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        roll, raw_name, marks = _RECORD.unpack(data)
        return cls(roll, raw_name.split(b"\0", 1)[0].decode("utf-8", "replace"), marks)


class StudentDatabase:
    """Records stored back to back in a single binary file."""

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)

    def create(self) -> None:
        """Create the file, or empty it if it exists."""
        self.path.write_bytes(b"")

    def insert(self, student: Student) -> None:
        """Append a record; the file must already exist."""
        data = student.to_bytes()
        with open(self.path, "r+b") as handle:
            handle.seek(0, os.SEEK_END)
            handle.write(data)

    def records(self) -> Iterator[Student]:
        """Yield every complete record in file order."""
        with open(self.path, "rb") as handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                yield Student.from_bytes(chunk)

    def search(self, roll: int) -> Student:
        """Return the first record with this roll number."""
        for student in self.records():
            if student.roll == roll:
                return student
        raise RecordNotFoundError(roll)

    def delete(self, roll: int) -> int:
        """Remove every record with this roll number; return how many went."""
        students = list(self.records())
        kept = [s for s in students if s.roll != roll]
        removed = len(students) - len(kept)
        if not removed:
            raise RecordNotFoundError(roll)
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(b"".join(s.to_bytes() for s in kept))
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        return removed

    def update(self, roll: int, name: str, marks: int) -> Student:
        """Rewrite the first record with this roll number in place."""
        updated = Student(roll, name, marks)
        data = updated.to_bytes()
        with open(self.path, "r+b") as handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                if Student.from_bytes(chunk).roll == roll:
                    handle.seek(-RECORD_SIZE, os.SEEK_CUR)
                    handle.write(data)
                    return updated
        raise RecordNotFoundError(roll)


class _Scanner:
    """Reads whitespace-separated integers and whole lines from standard input."""

    def __init__(self) -> None:
        self._buffer = ""

    def _fill(self) -> None:
        while not (stripped := self._buffer.lstrip()):
            line = sys.stdin.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._buffer = line
        self._buffer = stripped

    def read_int(self, prompt: str = "") -> int:
        print(prompt, end="", flush=True)
        self._fill()
        token, *rest = self._buffer.split(maxsplit=1)
        self._buffer = rest[0] if rest else ""
        return int(token)

    def read_line(self, prompt: str) -> str:
        print(prompt, end="", flush=True)
        self._fill()
        line, _, self._buffer = self._buffer.partition("\n")
        return line.rstrip("\r")


def _describe(student: Student) -> str:
    return f"Roll: {student.roll}, Name: {student.name}, Marks: {student.marks}"


_MENU = (
    "\n--- Student Database Menu ---\n"
    "1. Create\n2. View\n3. Insert\n4. Delete\n5. Update\n6. Search\n7. Exit\n"
    "Enter your choice: "
)


def _run_choice(choice: int, db: StudentDatabase, scanner: _Scanner) -> None:
    if choice == 1:
        db.create()
        print("Database file created successfully.")
    elif choice == 2:
        students = list(db.records())
        print("\n--- Student Records ---")
        for student in students:
            print(_describe(student))
    elif choice == 3:
        roll = scanner.read_int("Enter roll number: ")
        name = scanner.read_line("Enter name: ")
        marks = scanner.read_int("Enter marks: ")
        try:
            db.insert(Student(roll, name, marks))
        except ValueError as exc:
            print(f"Invalid record: {exc}")
        else:
            print("Student record inserted.")
    elif choice == 4:
        db.delete(scanner.read_int("Enter roll number to delete: "))
        print("Record deleted.")
    elif choice == 5:
        roll = scanner.read_int("Enter roll number to update: ")
        print(f"Current -> {_describe(db.search(roll))}")
        name = scanner.read_line("Enter new name: ")
        marks = scanner.read_int("Enter new marks: ")
        try:
            db.update(roll, name, marks)
        except ValueError as exc:
            print(exc)
        else:
            print("Record updated.")
    elif choice == 6:
        student = db.search(scanner.read_int("Enter roll number to search: "))
        print(f"Record Found -> {_describe(student)}")
    else:
        print("Invalid choice.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="osalgos-studentdb", description="Manage a binary student database."
    )
    parser.add_argument("path", nargs="?", default="student.dat")
    args = parser.parse_args(argv)

    db = StudentDatabase(args.path)
    scanner = _Scanner()
    while True:
        try:
            choice = scanner.read_int(_MENU)
        except EOFError:
            return 0
        except ValueError:
            print("Invalid choice.")
            continue
        if choice == 7:
            print("Exiting...")
            return 0
        try:
            _run_choice(choice, db, scanner)
        except RecordNotFoundError as exc:
            print(exc)
        except OSError:
            print("Could not create file." if choice == 1 else "Could not open file.")
        except EOFError as exc:
            print(f"\nerror: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())