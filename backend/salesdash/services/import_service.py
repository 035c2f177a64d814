# Overview: Service-layer operations for category file imports; parses uploads and writes rows.

"""
Category import

Accepts CSV (.csv/.txt) and Excel (.xlsx) uploads whose header row carries
`category_code` and `category_desc`. Each data row is checked on its own:
good rows are inserted, bad rows are reported as "Row N: reason" where N is
the line number in the file (the header is row 1).
"""

from __future__ import annotations

import csv
import io
from typing import IO, Any, Iterator

from flask import current_app

from ..errors import ImportPartialError, NothingImportedError, ValidationError
from ..extensions import db
from ..models import Category
from .category_service import code_taken

REQUIRED_COLUMNS = ("category_code", "category_desc")
CSV_EXTENSIONS = {"csv", "txt"}
EXCEL_EXTENSIONS = {"xlsx", "xlsm", "xltx", "xltm"}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _read_csv(stream: IO[bytes]) -> tuple[list[str], Iterator[tuple[int, dict]]]:
    try:
        text = stream.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationError("Validation failed", fields={"file": ["file must be UTF-8 encoded text"]})

    reader = csv.reader(io.StringIO(text), delimiter=",")
    header = next(reader, [])
    headers = [_cell(h) for h in header]

    def rows():
        # A quoted cell may span lines; report the line the record starts on.
        last_line = reader.line_num
        for raw in reader:
            line_no = last_line + 1
            last_line = reader.line_num
            if not any(_cell(v) for v in raw):
                continue
            yield line_no, dict(zip(headers, raw))

    return headers, rows()


def _read_excel(stream: IO[bytes]) -> tuple[list[str], Iterator[tuple[int, dict]]]:
    from openpyxl import load_workbook

    wb = load_workbook(stream, data_only=True)
    data = list(wb.active.values)
    header = data[0] if data else ()
    headers = [_cell(h) for h in header]

    def rows():
        for line_no, raw in enumerate(data[1:], start=2):
            if not any(_cell(v) for v in raw):
                continue
            yield line_no, dict(zip(headers, raw))

    return headers, rows()


def read_upload(filename: str, stream: IO[bytes]) -> tuple[list[str], Iterator[tuple[int, dict]]]:
    """Return (header columns, lazy iterator of (line number, row dict))."""
    ext = (filename or "").rsplit(".", 1)[-1].lower() if "." in (filename or "") else ""
    if ext in CSV_EXTENSIONS:
        return _read_csv(stream)
    if ext in EXCEL_EXTENSIONS:
        return _read_excel(stream)
    raise ValidationError("Validation failed", fields={"file": ["file must be a .csv, .txt or .xlsx file"]})


def _row_problem(code: str, desc: str, seen_codes: set[str]) -> str | None:
    if not code or not desc:
        return "Both category_code and category_desc are required"

    code_len = Category.__table__.c.category_code.type.length
    desc_len = Category.__table__.c.category_desc.type.length
    if len(code) > code_len:
        return f"category_code exceeds max length {code_len}"
    if len(desc) > desc_len:
        return f"category_desc exceeds max length {desc_len}"

    if code in seen_codes or code_taken(code):
        return f"Category code already exists: {code}"
    return None


def import_categories(*, filename: str, stream: IO[bytes]) -> int:
    """
    Import categories from an uploaded file.

    Returns the number of rows imported when every row is valid. Raises:
    - ValidationError when the file type or header is wrong (nothing read)
    - ImportPartialError when some rows failed (valid rows are committed)
    - NothingImportedError when no row could be imported
    """
    headers, records = read_upload(filename, stream)

    missing = [col for col in REQUIRED_COLUMNS if col not in headers]
    if missing:
        found = ", ".join(h for h in headers if h) or "none"
        raise ValidationError(
            "File must contain category_code and category_desc columns. "
            f"Found columns: {found}",
            fields={"file": [f"missing column {col}" for col in missing]},
        )

    current_app.logger.info("Starting category import from %s", filename)

    imported = 0
    errors: list[str] = []
    seen_codes: set[str] = set()

    for line_no, record in records:
        code = _cell(record.get("category_code"))
        desc = _cell(record.get("category_desc"))

        problem = _row_problem(code, desc, seen_codes)
        if problem:
            errors.append(f"Row {line_no}: {problem}")
            current_app.logger.warning("Skipping import row %s: %s", line_no, problem)
            continue

        db.session.add(Category(category_code=code, category_desc=desc))
        seen_codes.add(code)
        imported += 1

    if imported:
        db.session.commit()

    if imported == 0:
        current_app.logger.warning("No categories were imported from %s", filename)
        raise NothingImportedError(errors)
    if errors:
        current_app.logger.warning(
            "Category import finished with %d imported and %d failed rows", imported, len(errors)
        )
        raise ImportPartialError(imported, errors)

    current_app.logger.info("Category import completed: %d rows", imported)
    return imported
