"""
Row parser for product CSV uploads.

The grammar is deliberately narrower than RFC 4180: a field is one or more
pieces, each either a run of characters without commas or quotes, or a
double-quoted run (possibly empty). There is no `""` escape and a quoted
field cannot span lines. Bare commas between fields produce no field of
their own, so `a,,b` yields two cells and the header positions left over at
the end of the row become empty strings.

Import counts and duplicate detection are defined against exactly these
line and field boundaries; switching to the `csv` module would change them.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List

FIELD_RE = re.compile(r'(?:[^,"]+|"[^"]*")+')


@dataclass
class ParsedCsv:
    headers: List[str] = field(default_factory=list)
    rows: List[Dict[str, str]] = field(default_factory=list)


def clean_cell(value: str) -> str:
    return value.strip().strip('"').strip()


def split_fields(line: str) -> List[str]:
    return [clean_cell(m.group(0)) for m in FIELD_RE.finditer(line)]


def parse_csv(text: str) -> ParsedCsv:
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return ParsedCsv()

    # "\r" from CRLF files is whitespace and goes with the trim
    headers = [h.replace('"', "").strip() for h in lines[0].split(",")]

    rows = []
    for line in lines[1:]:
        values = split_fields(line)
        rows.append(
            {h: values[i] if i < len(values) else "" for i, h in enumerate(headers)}
        )
    return ParsedCsv(headers=headers, rows=rows)
