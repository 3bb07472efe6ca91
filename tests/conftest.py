"""Pytest configuration and fixtures for pdbligand tests."""

import pytest


def _atom_line(serial, name, x, y, z, element, chain="A"):
    """ATOM record in the fixed-column layout (78 characters)."""
    return (
        f"ATOM  {serial:>5d}  {name:<3} UNL {chain}   1    "
        f"{x:>8.3f}{y:>8.3f}{z:>8.3f}  1.00  0.00          {element:>2}"
    )


def _conect_line(serial, *bonded):
    return f"CONECT{serial:>5d}" + "".join(f"{b:>5d}" for b in bonded)


@pytest.fixture
def atom_line():
    """Factory for ATOM lines."""
    return _atom_line


@pytest.fixture
def conect_line():
    """Factory for CONECT lines."""
    return _conect_line


@pytest.fixture
def carbon_oxygen_document():
    """Two atoms one Angstrom apart, bonded 1 -> 2."""
    return "\n".join([
        _atom_line(1, "C1", 0.0, 0.0, 0.0, " C"),
        _atom_line(2, "O1", 1.0, 0.0, 0.0, " O"),
        _conect_line(1, 2),
        "END",
    ])


@pytest.fixture
def ethanol_document():
    """Ethanol ligand model with symmetric CONECT records."""
    atoms = [
        (1, "C1", 1.010, -0.011, 0.000, " C"),
        (2, "C2", -0.502, 0.025, 0.000, " C"),
        (3, "O", -0.985, -1.314, 0.000, " O"),
        (4, "H11", 1.377, 0.525, 0.876, " H"),
        (5, "H12", 1.377, 0.525, -0.876, " H"),
        (6, "H13", 1.379, -1.040, 0.000, " H"),
        (7, "H21", -0.869, 0.550, -0.883, " H"),
        (8, "H22", -0.869, 0.550, 0.883, " H"),
        (9, "HO", -1.939, -1.285, 0.000, " H"),
    ]
    bonds = {
        1: (2, 4, 5, 6),
        2: (1, 3, 7, 8),
        3: (2, 9),
        4: (1,),
        5: (1,),
        6: (1,),
        7: (2,),
        8: (2,),
        9: (3,),
    }
    lines = [_atom_line(*a) for a in atoms]
    lines += [_conect_line(serial, *bonded) for serial, bonded in bonds.items()]
    lines.append("END")
    return "\n".join(lines) + "\n"


@pytest.fixture
def ethanol_file(tmp_path, ethanol_document):
    """Ethanol document written to disk."""
    path = tmp_path / "EOH.pdb"
    path.write_text(ethanol_document)
    return path
