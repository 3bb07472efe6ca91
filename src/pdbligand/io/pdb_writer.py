"""
PDB ligand writer.

Writes ATOM and CONECT records in the same fixed-column layout the
parser reads, so a written molecule parses back to the same atoms and
links.
"""

from pathlib import Path
from typing import List, Union

from pdbligand.core.constants import CONECT_MAX_BONDED
from pdbligand.core.structures import Atom, Molecule

# Residue fields are not kept on atoms; ligand files use a placeholder
LIGAND_RES_NAME = "UNL"
LIGAND_RES_NUM = 1


def write_pdb(
    filename: Union[str, Path],
    molecule: Molecule,
) -> None:
    """
    Write a Molecule to PDB format.

    Args:
        filename: Output file path
        molecule: Molecule to write
    """
    with open(filename, "w", encoding="utf-8") as f:
        f.write(molecule_to_pdb_string(molecule))
        f.write("\n")


def _fit_float(value: float, width: int, field: str) -> str:
    """
    Right-justified value in exactly `width` columns.

    Uses three decimals when they fit, dropping precision down to none
    for wide values.

    Raises:
        ValueError: If even the integer part does not fit
    """
    for decimals in (3, 2, 1, 0):
        text = f"{value:>{width}.{decimals}f}"
        if len(text) <= width:
            return text
    raise ValueError(f"{field} value {value} does not fit in {width} columns")


def _fit_int(value: int, width: int, field: str) -> str:
    text = f"{value:>{width}d}"
    if len(text) > width:
        raise ValueError(f"{field} value {value} does not fit in {width} columns")
    return text


def format_atom_line(atom: Atom) -> str:
    """
    Format a single ATOM line.

    COLUMNS        DATA TYPE       CONTENTS
    --------------------------------------------------------------------------------
     1 -  6        Record name     "ATOM  "
     7 - 11        Integer         Atom serial number
    13 - 16        Atom            Atom name
    18 - 20        Residue name    Residue name (placeholder)
    22             Character       Chain identifier
    23 - 26        Integer         Residue sequence number (placeholder)
    31 - 38        Real(8.3)       X coordinate
    39 - 46        Real(8.3)       Y coordinate
    47 - 54        Real(8.3)       Z coordinate
    55 - 60        Real(6.2)       Occupancy
    61 - 66        Real(6.2)       Temperature factor
    77 - 78        LString(2)      Element symbol
    """
    name = atom.name.strip()
    if len(name) < 4:
        atom_name_fmt = f" {name:<3}"
    else:
        atom_name_fmt = f"{name:<4}"

    # fmt: off
    line = (
        f"ATOM  "                              # 1-6:   Record name
        f"{_fit_int(atom.serial, 5, 'serial')} "  # 7-11:  Serial number + col 12 space
        f"{atom_name_fmt}"                     # 13-16: Atom name
        f" "                                   # 17:    AltLoc (blank)
        f"{LIGAND_RES_NAME:<3} "               # 18-20: ResName + col 21 space
        f"{atom.chain_id or ' ':1}"            # 22:    Chain ID
        f"{LIGAND_RES_NUM:>4d}"                # 23-26: Residue sequence number
        f" "                                   # 27:    Insertion code
        f"   "                                 # 28-30: Blank
        f"{_fit_float(atom.x, 8, 'x')}"        # 31-38: X coordinate
        f"{_fit_float(atom.y, 8, 'y')}"        # 39-46: Y coordinate
        f"{_fit_float(atom.z, 8, 'z')}"        # 47-54: Z coordinate
        f"{1.0:>6.2f}"                         # 55-60: Occupancy
        f"{0.0:>6.2f}"                         # 61-66: Temperature factor
        f"          "                          # 67-76: Blank
        f"{atom.element:>2}"                   # 77-78: Element symbol
    )
    # fmt: on

    return line


def format_conect_lines(atom: Atom) -> List[str]:
    """
    Format CONECT lines for an atom's links.

    Links are written in order, at most four per line; longer link
    lists continue on further CONECT lines for the same anchor.
    """
    lines = []
    for i in range(0, len(atom.links), CONECT_MAX_BONDED):
        chunk = atom.links[i:i + CONECT_MAX_BONDED]
        fields = [_fit_int(atom.serial, 5, "serial")]
        fields += [_fit_int(s, 5, "bonded serial") for s in chunk]
        lines.append("CONECT" + "".join(fields))
    return lines


def molecule_to_pdb_string(molecule: Molecule) -> str:
    """
    Convert a Molecule to a PDB format string.

    Atoms are written in ascending serial order, followed by CONECT
    records in the same order and a closing END.
    """
    serials = sorted(molecule.atoms)
    lines = [format_atom_line(molecule.atoms[s]) for s in serials]
    for s in serials:
        lines.extend(format_conect_lines(molecule.atoms[s]))
    lines.append("END")
    return "\n".join(lines)
