"""
Ligand PDB document parser.

Builds a Molecule from a whole document in two passes: ATOM records
first, then CONECT records. Record kinds are recognised by substring
("ATOM" / "CONECT" anywhere in the line), not by the record-name
columns, so any line mentioning ATOM is decoded as an atom.
"""

from pathlib import Path
from typing import Union
import logging

from pdbligand.core.constants import RECORD_ATOM, RECORD_CONECT
from pdbligand.core.errors import (
    DanglingBondReference,
    DocumentDecodeError,
    MalformedRecord,
)
from pdbligand.core.structures import Atom, Molecule, ParseIssue, IssueKind
from pdbligand.io.records import parse_atom_record, parse_conect_record

logger = logging.getLogger(__name__)


def decode_document(document: Union[str, bytes]) -> str:
    """
    Return the document as text, decoding bytes as UTF-8.

    A leading byte-order mark is dropped so the first line keeps its
    column positions.

    Raises:
        DocumentDecodeError: If bytes are not valid UTF-8
    """
    if isinstance(document, str):
        return document[1:] if document.startswith("\ufeff") else document
    try:
        return bytes(document).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(f"Document is not valid UTF-8: {e}") from e


def build_molecule(
    document: Union[str, bytes],
    name: str = "",
    strict: bool = False,
) -> Molecule:
    """
    Parse a ligand document into a Molecule.

    Args:
        document: Full document text (or UTF-8 bytes)
        name: Name given to the resulting molecule
        strict: If True, the first malformed ATOM or CONECT record aborts
            the parse with MalformedRecord. Otherwise the record is
            skipped and noted in molecule.issues.

    Returns:
        Molecule with atoms keyed by serial and links filled from CONECT

    Raises:
        DocumentDecodeError: If the document is not decodable text
        MalformedRecord: Only when strict is True
    """
    lines = decode_document(document).splitlines()
    mol = Molecule(name=name)

    def skip(line_number: int, line: str, error: MalformedRecord):
        if strict:
            raise error.at_line(line_number)
        logger.warning("Skipping malformed record at line %d: %s", line_number, error.reason)
        mol.issues.append(
            ParseIssue(line_number, IssueKind.MALFORMED_RECORD, line, error.reason)
        )

    # Pass 1: atoms (last record with a given serial wins)
    for line_number, line in enumerate(lines, start=1):
        if RECORD_ATOM not in line:
            continue
        try:
            record = parse_atom_record(line)
        except MalformedRecord as e:
            skip(line_number, line, e)
            continue

        if record.serial in mol.atoms:
            logger.debug("Atom serial %d redefined at line %d", record.serial, line_number)
        mol.atoms[record.serial] = Atom(
            serial=record.serial,
            name=record.name,
            chain_id=record.chain_id,
            position=record.position,
            element=record.element,
        )

    # Pass 2: connectivity
    for line_number, line in enumerate(lines, start=1):
        if RECORD_CONECT not in line:
            continue
        try:
            record = parse_conect_record(line)
        except MalformedRecord as e:
            skip(line_number, line, e)
            continue

        atom = mol.atoms.get(record.serial)
        if atom is None:
            reason = str(DanglingBondReference(record.serial))
            logger.debug("Skipping CONECT at line %d: %s", line_number, reason)
            mol.issues.append(
                ParseIssue(line_number, IssueKind.DANGLING_BOND_REFERENCE, line, reason)
            )
            continue

        atom.links.extend(record.bonded)

    if mol.is_empty:
        logger.warning("No ATOM records decoded%s", f" in {name}" if name else "")

    return mol


def read_pdb_file(
    filename: Union[str, Path],
    strict: bool = False,
) -> Molecule:
    """
    Read a ligand PDB file and convert it to a Molecule.

    Args:
        filename: Path to PDB file
        strict: Abort on the first malformed record (see build_molecule)

    Returns:
        Molecule named after the file stem
    """
    path = Path(filename)
    return build_molecule(path.read_bytes(), name=path.stem, strict=strict)
