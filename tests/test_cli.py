"""Tests for the command-line interface and the LigandBuilder facade."""

import pytest
from click.testing import CliRunner

from pdbligand import LigandBuilder, __version__, build
from pdbligand.cli import main
from pdbligand.core.errors import MalformedRecord
from pdbligand.io.pdb_parser import read_pdb_file


class TestLigandBuilder:
    """Test LigandBuilder class."""

    def test_build(self, ethanol_document):
        mol = LigandBuilder().build(ethanol_document, name="EOH")
        assert mol.name == "EOH"
        assert mol.natoms == 9

    def test_load(self, ethanol_file):
        mol = LigandBuilder(verbose=True).load(ethanol_file)
        assert mol.name == "EOH"

    def test_placements(self, ethanol_document):
        builder = LigandBuilder(bond_radius=0.2, bond_segments=12)
        mol = builder.build(ethanol_document)
        placements = list(builder.placements(mol))
        assert len(placements) == 8
        for atom, other, placement in placements:
            assert placement.radius == 0.2
            assert placement.segments == 12
            assert placement.length == pytest.approx(atom.distance_to(other), rel=1e-6)

    def test_placements_not_unique(self, ethanol_document):
        builder = LigandBuilder(unique_bonds=False)
        assert len(list(builder.placements(builder.build(ethanol_document)))) == 16

    def test_strict(self, carbon_oxygen_document):
        with pytest.raises(MalformedRecord):
            LigandBuilder(strict=True).build(carbon_oxygen_document + "\nCONECT    1")

    def test_write(self, tmp_path, ethanol_document):
        builder = LigandBuilder()
        mol = builder.build(ethanol_document)
        path = tmp_path / "copy.pdb"
        builder.write(mol, path)
        assert read_pdb_file(path).atoms == mol.atoms

    def test_convenience_build(self, carbon_oxygen_document):
        mol = build(carbon_oxygen_document, name="CO", strict=True)
        assert mol.name == "CO"
        assert mol.atoms[1].links == [2]


class TestCli:
    """Test the pdbligand command."""

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_summary(self, ethanol_file):
        result = CliRunner().invoke(main, [str(ethanol_file)])
        assert result.exit_code == 0
        assert "Molecule: EOH" in result.output
        assert "Atoms: 9" in result.output
        assert "Bonds: 8" in result.output
        assert "Skipped records: 0" in result.output

    def test_bonds(self, tmp_path, carbon_oxygen_document):
        path = tmp_path / "co.pdb"
        path.write_text(carbon_oxygen_document)
        result = CliRunner().invoke(main, [str(path), "--bonds"])
        assert result.exit_code == 0
        assert "    1 C  -     2 O     1.000" in result.output

    def test_output(self, tmp_path, ethanol_file):
        out = tmp_path / "written.pdb"
        result = CliRunner().invoke(main, [str(ethanol_file), "-O", str(out), "-v"])
        assert result.exit_code == 0
        assert out.exists()
        assert read_pdb_file(out).natoms == 9

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.pdb"
        path.write_text("REMARK nothing here\nEND\n")
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == 1
        assert "no ATOM records" in result.output

    def test_strict_failure(self, tmp_path, carbon_oxygen_document):
        path = tmp_path / "bad.pdb"
        path.write_text(carbon_oxygen_document + "\nCONECT    1\n")
        assert CliRunner().invoke(main, [str(path)]).exit_code == 0
        result = CliRunner().invoke(main, [str(path), "--strict"])
        assert result.exit_code == 1
        assert "malformed record" in result.output

    def test_missing_argument(self):
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 2
