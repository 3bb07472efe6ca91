"""
Constants for the PDB ligand record layout and bond geometry.

Column slices are 0-indexed and half-open, following the legacy
Protein Data Bank fixed-column convention.
"""

import numpy as np

# Version
PDBLIGAND_VERSION = "1.0.0"

# Record kind tags (matched as substrings anywhere in a line)
RECORD_ATOM = "ATOM"
RECORD_CONECT = "CONECT"

# ATOM record columns
ATOM_SERIAL = slice(6, 11)
ATOM_NAME = slice(12, 16)
ATOM_CHAIN = slice(21, 22)
ATOM_X = slice(30, 38)
ATOM_Y = slice(38, 46)
ATOM_Z = slice(46, 54)
ATOM_ELEMENT = slice(76, 78)

# CONECT record columns
CONECT_SERIAL = slice(6, 11)
CONECT_BONDED_REQUIRED = slice(11, 16)
CONECT_BONDED_OPTIONAL = (
    slice(16, 21),
    slice(21, 26),
    slice(26, 31),
)

# Bonded serials a single CONECT line can carry
CONECT_MAX_BONDED = 1 + len(CONECT_BONDED_OPTIONAL)

# Coordinate storage type
COORD_DTYPE = np.float32

# Bond cylinder defaults
DEFAULT_BOND_RADIUS = 0.1
DEFAULT_BOND_SEGMENTS = 10

# A cylinder's default (local) vertical axis
REFERENCE_AXIS = np.array([0.0, 1.0, 0.0])

# Below this length two positions are treated as coincident
GEOM_EPS = 1e-8
