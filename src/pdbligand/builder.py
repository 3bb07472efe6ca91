"""
Main entry point for turning ligand documents into molecules.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple, Union
import logging

from pdbligand.core.constants import DEFAULT_BOND_RADIUS, DEFAULT_BOND_SEGMENTS
from pdbligand.core.geometry import BondPlacement, iter_bond_placements
from pdbligand.core.structures import Atom, Molecule
from pdbligand.io.pdb_parser import build_molecule, read_pdb_file
from pdbligand.io.pdb_writer import write_pdb

logger = logging.getLogger(__name__)


@dataclass
class BuildConfig:
    """Configuration for building molecules and bond placements."""

    # Parsing options
    strict: bool = False

    # Bond cylinder options
    bond_radius: float = DEFAULT_BOND_RADIUS
    bond_segments: int = DEFAULT_BOND_SEGMENTS
    unique_bonds: bool = True

    # Behavior
    verbose: bool = False


class LigandBuilder:
    """
    Builds Molecule graphs from PDB ligand documents.

    Holds no per-document state, so one builder can serve any number of
    documents, including from several threads.

    Example usage:
        >>> builder = LigandBuilder()
        >>> molecule = builder.build(text, name="HEM")
        >>> for atom, other, placement in builder.placements(molecule):
        ...     draw_cylinder(placement)

        >>> builder = LigandBuilder(strict=True)
        >>> molecule = builder.load("ligand.pdb")
    """

    def __init__(
        self,
        strict: bool = False,
        bond_radius: float = DEFAULT_BOND_RADIUS,
        bond_segments: int = DEFAULT_BOND_SEGMENTS,
        unique_bonds: bool = True,
        verbose: bool = False,
    ):
        """
        Initialize the builder with configuration options.

        Args:
            strict: Abort on the first malformed record instead of skipping it
            bond_radius: Radius reported in each BondPlacement
            bond_segments: Segment count reported in each BondPlacement
            unique_bonds: Place each bonded atom pair once
            verbose: Log progress at INFO level
        """
        self.config = BuildConfig(
            strict=strict,
            bond_radius=bond_radius,
            bond_segments=bond_segments,
            unique_bonds=unique_bonds,
            verbose=verbose,
        )

    def build(self, document: Union[str, bytes], name: str = "") -> Molecule:
        """
        Build a molecule from document text.

        Args:
            document: Full PDB ligand document
            name: Name for the molecule (e.g., the ligand code)

        Returns:
            Parsed Molecule
        """
        molecule = build_molecule(document, name=name, strict=self.config.strict)
        self._report(molecule)
        return molecule

    def load(self, input_path: Union[str, Path]) -> Molecule:
        """
        Build a molecule from a PDB file.

        Args:
            input_path: Path to the ligand PDB file

        Returns:
            Parsed Molecule named after the file stem
        """
        if self.config.verbose:
            logger.info("Reading %s...", input_path)

        molecule = read_pdb_file(input_path, strict=self.config.strict)
        self._report(molecule)
        return molecule

    def placements(self, molecule: Molecule) -> Iterator[Tuple[Atom, Atom, BondPlacement]]:
        """
        Cylinder placements for the molecule's resolved bonds.

        Returns:
            Iterator of (atom, bonded_atom, placement)
        """
        return iter_bond_placements(
            molecule,
            unique=self.config.unique_bonds,
            radius=self.config.bond_radius,
            segments=self.config.bond_segments,
        )

    def write(self, molecule: Molecule, output_path: Union[str, Path]) -> None:
        """Write a molecule back out as ATOM/CONECT records."""
        if self.config.verbose:
            logger.info("Writing %s...", output_path)
        write_pdb(output_path, molecule)

    def _report(self, molecule: Molecule):
        if not self.config.verbose:
            return
        logger.info(
            "Built %s: %d atoms, %d links, %d skipped records",
            molecule.name or "molecule",
            molecule.natoms,
            molecule.nbonds,
            len(molecule.skipped_records()),
        )


def build(document: Union[str, bytes], name: str = "", **kwargs) -> Molecule:
    """
    Convenience function for quick parsing.

    Args:
        document: Full PDB ligand document
        name: Name for the molecule
        **kwargs: Additional options passed to LigandBuilder

    Returns:
        Parsed Molecule
    """
    return LigandBuilder(**kwargs).build(document, name=name)
