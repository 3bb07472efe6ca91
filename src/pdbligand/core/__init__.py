"""Core data structures and utilities."""

from pdbligand.core.structures import Atom, Molecule, ParseIssue, IssueKind
from pdbligand.core.constants import (
    RECORD_ATOM,
    RECORD_CONECT,
    DEFAULT_BOND_RADIUS,
    DEFAULT_BOND_SEGMENTS,
    REFERENCE_AXIS,
)
from pdbligand.core.errors import (
    PDBLigandError,
    MalformedRecord,
    DocumentDecodeError,
    DanglingBondReference,
    UnresolvedBondTarget,
)
from pdbligand.core.palette import DisplayCategory, category_for, rgb_for
from pdbligand.core.geometry import (
    BondPlacement,
    bond_placement,
    iter_bond_placements,
    calc_distance,
    normalize,
    rotation_between,
)

__all__ = [
    "Atom",
    "Molecule",
    "ParseIssue",
    "IssueKind",
    "RECORD_ATOM",
    "RECORD_CONECT",
    "DEFAULT_BOND_RADIUS",
    "DEFAULT_BOND_SEGMENTS",
    "REFERENCE_AXIS",
    "PDBLigandError",
    "MalformedRecord",
    "DocumentDecodeError",
    "DanglingBondReference",
    "UnresolvedBondTarget",
    "DisplayCategory",
    "category_for",
    "rgb_for",
    "BondPlacement",
    "bond_placement",
    "iter_bond_placements",
    "calc_distance",
    "normalize",
    "rotation_between",
]
