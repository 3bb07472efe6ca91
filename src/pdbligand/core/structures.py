"""
Core data structures for the ligand atom/bond graph.

Bonds are stored as serial numbers on each atom (an index into
Molecule.atoms), never as object references.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple
import numpy as np

from pdbligand.core.constants import COORD_DTYPE
from pdbligand.core.errors import UnresolvedBondTarget
from pdbligand.core.palette import DisplayCategory, category_for


@dataclass(frozen=True, eq=False)
class Atom:
    """
    A single atom decoded from an ATOM record.

    The serial is fixed at construction. `links` is the only part that
    grows, and only while the molecule is being built.
    """

    serial: int  # Atom serial number (key within a Molecule)
    name: str  # Trimmed atom name (e.g., "C1", "O2")
    chain_id: str  # Chain identifier, informational
    position: np.ndarray  # [x, y, z] in Angstrom, float32
    element: str  # Two-character element code as written (e.g., " C")
    links: List[int] = field(default_factory=list)  # Bonded serials, declaration order

    def __post_init__(self):
        """Store the position as a float32 array."""
        object.__setattr__(self, "position", np.asarray(self.position, dtype=COORD_DTYPE).reshape(3))

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def z(self) -> float:
        return float(self.position[2])

    @property
    def symbol(self) -> str:
        """Element symbol without padding, capitalised (e.g., "Cl")."""
        return self.element.strip().capitalize()

    @property
    def category(self) -> DisplayCategory:
        """CPK display category of this atom's element."""
        return category_for(self.element)

    def distance_to(self, other: "Atom") -> float:
        """Calculate distance to another atom."""
        diff = self.position.astype(np.float64) - other.position.astype(np.float64)
        return float(np.linalg.norm(diff))

    def __eq__(self, other):
        if not isinstance(other, Atom):
            return NotImplemented
        return (
            self.serial == other.serial
            and self.name == other.name
            and self.chain_id == other.chain_id
            and self.element == other.element
            and self.links == other.links
            and np.array_equal(self.position, other.position)
        )

    __hash__ = object.__hash__


class IssueKind(Enum):
    """Kinds of non-fatal problems recorded during a parse."""

    MALFORMED_RECORD = "malformed-record"
    DANGLING_BOND_REFERENCE = "dangling-bond-reference"


@dataclass(frozen=True)
class ParseIssue:
    """A record that was skipped while building a molecule."""

    line_number: int  # 1-based line number in the document
    kind: IssueKind
    line: str
    reason: str


@dataclass
class Molecule:
    """
    A ligand model: atoms keyed by serial number.

    Iteration order of `atoms` is not meaningful. A molecule returned by
    the parser is a finished snapshot: nothing in the package mutates it
    afterwards, and callers should treat it as read-only.
    """

    atoms: Dict[int, Atom] = field(default_factory=dict)
    name: str = ""
    issues: List[ParseIssue] = field(default_factory=list)

    @property
    def natoms(self) -> int:
        """Number of atoms."""
        return len(self.atoms)

    @property
    def nbonds(self) -> int:
        """Number of declared links, duplicates and dangling targets included."""
        return sum(len(atom.links) for atom in self.atoms.values())

    @property
    def is_empty(self) -> bool:
        return not self.atoms

    def get_atom(self, serial: int) -> Optional[Atom]:
        """
        Get an atom by serial number.

        Args:
            serial: Atom serial number

        Returns:
            Atom object or None if not found
        """
        return self.atoms.get(serial)

    def require_atom(self, serial: int) -> Atom:
        """Get an atom by serial, raising UnresolvedBondTarget if absent."""
        try:
            return self.atoms[serial]
        except KeyError:
            raise UnresolvedBondTarget(serial) from None

    def bonds(self) -> Iterator[Tuple[Atom, Atom]]:
        """
        Iterate declared links whose target exists.

        Links to serials missing from the molecule are skipped.

        Yields:
            (atom, bonded_atom) pairs, one per resolved link
        """
        for atom in self.atoms.values():
            for target_serial in atom.links:
                target = self.atoms.get(target_serial)
                if target is not None:
                    yield atom, target

    def unique_bonds(self) -> Iterator[Tuple[Atom, Atom]]:
        """Like bonds(), but each unordered atom pair is yielded once."""
        seen = set()
        for atom, target in self.bonds():
            key = (min(atom.serial, target.serial), max(atom.serial, target.serial))
            if key in seen:
                continue
            seen.add(key)
            yield atom, target

    def unresolved_links(self) -> List[Tuple[int, int]]:
        """(anchor_serial, target_serial) for every link with no target atom."""
        return [
            (atom.serial, target)
            for atom in self.atoms.values()
            for target in atom.links
            if target not in self.atoms
        ]

    def skipped_records(self) -> List[ParseIssue]:
        """Issues for records dropped because they could not be decoded."""
        return [i for i in self.issues if i.kind is IssueKind.MALFORMED_RECORD]

    def get_coords(self) -> np.ndarray:
        """
        Get array of all atom positions.

        Returns:
            (N, 3) numpy array, in ascending serial order
        """
        if not self.atoms:
            return np.zeros((0, 3), dtype=COORD_DTYPE)
        return np.array([self.atoms[s].position for s in sorted(self.atoms)])

    def centroid(self) -> np.ndarray:
        """Geometric center of all atoms (origin for an empty molecule)."""
        if not self.atoms:
            return np.zeros(3)
        return self.get_coords().astype(np.float64).mean(axis=0)

    def bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Axis-aligned bounds of the atom positions.

        Returns:
            Tuple of (min_corner, max_corner); both at the origin when empty
        """
        if not self.atoms:
            return np.zeros(3), np.zeros(3)
        coords = self.get_coords().astype(np.float64)
        return coords.min(axis=0), coords.max(axis=0)
