"""PDB I/O module."""

from pdbligand.io.records import parse_atom_record, parse_conect_record
from pdbligand.io.pdb_parser import build_molecule, read_pdb_file
from pdbligand.io.pdb_writer import write_pdb, molecule_to_pdb_string

__all__ = [
    "parse_atom_record",
    "parse_conect_record",
    "build_molecule",
    "read_pdb_file",
    "write_pdb",
    "molecule_to_pdb_string",
]
