"""
pdbligand - PDB ligand models as atom/bond graphs

Decodes fixed-column PDB ligand documents into a graph of atoms keyed by
serial number, and computes the cylinder placement for each bond.
"""

__version__ = "1.0.0"

from pdbligand.builder import LigandBuilder, BuildConfig, build
from pdbligand.core.structures import Atom, Molecule
from pdbligand.core.geometry import BondPlacement, bond_placement
from pdbligand.core.palette import DisplayCategory, category_for

__all__ = [
    "LigandBuilder",
    "BuildConfig",
    "build",
    "Atom",
    "Molecule",
    "BondPlacement",
    "bond_placement",
    "DisplayCategory",
    "category_for",
    "__version__",
]
