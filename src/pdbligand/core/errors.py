"""Exception types raised while decoding ligand documents."""

from typing import Optional


class PDBLigandError(Exception):
    """Base class for all pdbligand errors."""


class MalformedRecord(PDBLigandError, ValueError):
    """
    A required fixed-column field could not be decoded.

    Raised for a non-numeric value where a number was expected, or for a
    column range that runs past the end of the line.
    """

    def __init__(self, field: str, line: str, reason: str = "", line_number: Optional[int] = None):
        self.field = field
        self.line = line
        self.reason = reason or f"cannot decode field '{field}'"
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{where}{self.reason}: {self.line.rstrip()!r}"

    def at_line(self, line_number: int) -> "MalformedRecord":
        """Return a copy of this error tagged with a 1-based line number."""
        return MalformedRecord(self.field, self.line, self.reason, line_number)


class DocumentDecodeError(PDBLigandError, UnicodeError):
    """The input document could not be decoded as UTF-8 text."""


class DanglingBondReference(PDBLigandError):
    """A CONECT record names an anchor serial with no matching ATOM record."""

    def __init__(self, serial: int):
        self.serial = serial
        super().__init__(f"CONECT anchor serial {serial} has no ATOM record")


class UnresolvedBondTarget(PDBLigandError, KeyError):
    """A link points at a serial that is not present in the molecule."""

    def __init__(self, serial: int):
        self.serial = serial
        super().__init__(serial)

    def __str__(self) -> str:
        return f"no atom with serial {self.serial}"
