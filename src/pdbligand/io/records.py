"""
Fixed-column record decoding for ATOM and CONECT lines.

Each function decodes a single line; it knows nothing about the rest of
the document.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pdbligand.core.constants import (
    ATOM_SERIAL,
    ATOM_NAME,
    ATOM_CHAIN,
    ATOM_X,
    ATOM_Y,
    ATOM_Z,
    ATOM_ELEMENT,
    CONECT_SERIAL,
    CONECT_BONDED_REQUIRED,
    CONECT_BONDED_OPTIONAL,
)
from pdbligand.core.errors import MalformedRecord


@dataclass(frozen=True)
class AtomRecord:
    """Decoded fields of one ATOM line."""

    serial: int
    name: str
    chain_id: str
    position: Tuple[float, float, float]
    element: str


@dataclass(frozen=True)
class ConectRecord:
    """Decoded fields of one CONECT line."""

    serial: int
    bonded: Tuple[int, ...]  # Required slot first, then each optional slot that decoded


def _column(line: str, columns: slice, field: str) -> str:
    """Raw text of a required column range; the whole range must exist."""
    if len(line) < columns.stop:
        raise MalformedRecord(
            field, line, f"field '{field}' needs columns {columns.start}-{columns.stop - 1}, "
            f"line has {len(line)} characters"
        )
    return line[columns]


def _int_field(line: str, columns: slice, field: str) -> int:
    text = _column(line, columns, field).strip()
    try:
        return int(text)
    except ValueError:
        raise MalformedRecord(field, line, f"field '{field}' is not an integer: {text!r}") from None


def _float_field(line: str, columns: slice, field: str) -> float:
    text = _column(line, columns, field).strip()
    try:
        return float(text)
    except ValueError:
        raise MalformedRecord(field, line, f"field '{field}' is not a number: {text!r}") from None


def _serial_field(line: str, columns: slice) -> int:
    serial = _int_field(line, columns, "serial")
    if serial <= 0:
        raise MalformedRecord("serial", line, f"field 'serial' must be positive: {serial}")
    return serial


def _optional_int(line: str, columns: slice) -> Optional[int]:
    """Integer in an optional column, or None if blank, garbled or missing."""
    text = line[columns].strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_atom_record(line: str) -> AtomRecord:
    """
    Decode an ATOM line.

    Args:
        line: One line of the document, without the trailing newline

    Returns:
        AtomRecord with trimmed name and the element code as written

    Raises:
        MalformedRecord: If serial or a coordinate does not parse, or the
            line ends before the element columns
    """
    serial = _serial_field(line, ATOM_SERIAL)
    x = _float_field(line, ATOM_X, "x")
    y = _float_field(line, ATOM_Y, "y")
    z = _float_field(line, ATOM_Z, "z")
    element = _column(line, ATOM_ELEMENT, "element")

    return AtomRecord(
        serial=serial,
        name=line[ATOM_NAME].strip(),
        chain_id=line[ATOM_CHAIN],
        position=(x, y, z),
        element=element,
    )


def parse_conect_record(line: str) -> ConectRecord:
    """
    Decode a CONECT line.

    The anchor serial and the first bonded serial are required. The
    three remaining bonded columns are each optional and tried
    independently, so a blank second slot does not hide a third.

    Raises:
        MalformedRecord: If the anchor or first bonded serial does not parse
    """
    serial = _serial_field(line, CONECT_SERIAL)
    bonded = [_int_field(line, CONECT_BONDED_REQUIRED, "bonded")]

    for columns in CONECT_BONDED_OPTIONAL:
        value = _optional_int(line, columns)
        if value is not None:
            bonded.append(value)

    return ConectRecord(serial=serial, bonded=tuple(bonded))
