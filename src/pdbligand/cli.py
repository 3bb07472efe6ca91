"""
Command-line interface for pdbligand.

Provides the `pdbligand` command for inspecting PDB ligand files.
"""

import logging
import sys
from pathlib import Path

import click

from pdbligand import __version__
from pdbligand.core.errors import DocumentDecodeError, MalformedRecord


@click.command()
@click.argument("pdb_file", type=click.Path(exists=True), required=False)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option(
    "-s", "--strict", is_flag=True, help="Abort on the first malformed record"
)
@click.option("-b", "--bonds", is_flag=True, help="List bonds with their lengths")
@click.option("-O", "--output", type=click.Path(), help="Write the parsed molecule here")
@click.option("--version", is_flag=True, help="Show version and exit")
def main(pdb_file, verbose, strict, bonds, output, version):
    """
    Parse a PDB ligand file into its atom/bond graph.

    Example usage:

        pdbligand ATP_ideal.pdb

        pdbligand -v --bonds HEM.pdb

        pdbligand --strict ligand.pdb -O cleaned.pdb
    """
    if version:
        click.echo(f"pdbligand version {__version__}")
        return

    if pdb_file is None:
        raise click.UsageError("Missing argument 'PDB_FILE'.")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if verbose:
        click.echo(f"pdbligand v{__version__}")
        click.echo(f"Input: {pdb_file}")
        click.echo()

    from pdbligand import LigandBuilder

    builder = LigandBuilder(strict=strict, verbose=verbose)

    try:
        molecule = builder.load(pdb_file)
    except MalformedRecord as e:
        click.echo(f"Error: malformed record, {e}", err=True)
        sys.exit(1)
    except (DocumentDecodeError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if molecule.is_empty:
        click.echo(f"Error: no ATOM records found in {pdb_file}", err=True)
        sys.exit(1)

    click.echo(f"Molecule: {molecule.name}")
    click.echo(f"  Atoms: {molecule.natoms}")
    click.echo(f"  Bonds: {sum(1 for _ in molecule.unique_bonds())}")
    click.echo(f"  Skipped records: {len(molecule.skipped_records())}")

    unresolved = molecule.unresolved_links()
    if unresolved and verbose:
        click.echo(f"  Unresolved links: {len(unresolved)}")

    if bonds:
        click.echo()
        placements = sorted(
            builder.placements(molecule), key=lambda t: (t[0].serial, t[1].serial)
        )
        for atom, other, placement in placements:
            click.echo(
                f"{atom.serial:>5d} {atom.symbol:<2} - "
                f"{other.serial:>5d} {other.symbol:<2} {placement.length:8.3f}"
            )

    if output is not None:
        try:
            builder.write(molecule, output)
        except ValueError as e:
            click.echo(f"Error: cannot write {output}: {e}", err=True)
            sys.exit(1)
        if verbose:
            click.echo(f"  Output: {Path(output)}")


if __name__ == "__main__":
    main()
