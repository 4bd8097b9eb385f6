import csv
import os
from typing import NamedTuple

from . import logger


class ParseError(ValueError):
    def __init__(self, path, line_num: int, reason: str):
        super().__init__(f"{path}:{line_num}: {reason}")
        self.line_num = line_num


class Translation(NamedTuple):
    english: str
    german: str


def read_translations(path: str | os.PathLike) -> list[Translation]:
    """
    Read a two-column translation CSV whose first line is a header. Columns
    are German then English, as in the WMT14 de-en export. Fields may be
    double-quoted, with "" standing for a literal quote.

    Raises OSError if the file cannot be opened, and ParseError if the file is
    not valid UTF-8 or a data row does not have exactly two fields. Blank
    lines are skipped.
    """
    translations: list[Translation] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        try:
            next(reader, None)

            for row in reader:
                if not row:
                    continue
                if len(row) != 2:
                    raise ParseError(
                        path, reader.line_num, f"expected 2 fields, found {len(row)}"
                    )

                german, english = row
                translations.append(Translation(english, german))
        except UnicodeDecodeError as e:
            # Decoding runs ahead of the csv reader, so the line is approximate.
            raise ParseError(path, reader.line_num + 1, f"invalid UTF-8: {e}") from e

    logger.info(f"Read {len(translations)} translations from {path}")
    return translations
