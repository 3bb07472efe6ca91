"""
Bond geometry: where and how to place a cylinder between two atoms.

All functions here are pure; placements are computed on demand and
never stored on the molecule.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import logging

import numpy as np
from scipy.spatial.transform import Rotation

from pdbligand.core.constants import (
    DEFAULT_BOND_RADIUS,
    DEFAULT_BOND_SEGMENTS,
    GEOM_EPS,
    REFERENCE_AXIS,
)
from pdbligand.core.structures import Atom, Molecule

logger = logging.getLogger(__name__)


def calc_distance(p1: np.ndarray, p2: np.ndarray) -> float:
    """
    Calculate Euclidean distance between two points.

    Args:
        p1: First point [x, y, z]
        p2: Second point [x, y, z]

    Returns:
        Distance between points (never negative)
    """
    diff = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    dist_sq = np.dot(diff, diff)
    if dist_sq > 0:
        return abs(float(np.sqrt(dist_sq)))
    return 0.0


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Normalize a vector to unit length.

    A zero vector is returned unchanged (as a copy).
    """
    v = np.asarray(v, dtype=np.float64)
    d = np.linalg.norm(v)
    if d > 0:
        return v / d
    return v.copy()


def _perpendicular(u: np.ndarray) -> np.ndarray:
    """Any unit vector perpendicular to unit vector u."""
    trial = np.cross(u, [1.0, 0.0, 0.0])
    if np.linalg.norm(trial) < GEOM_EPS:
        trial = np.cross(u, [0.0, 0.0, 1.0])
    return normalize(trial)


def rotation_between(u: np.ndarray, v: np.ndarray) -> Rotation:
    """
    Shortest rotation taking direction u onto direction v.

    Parallel directions give the identity, anti-parallel ones a half turn
    about an axis perpendicular to u. A zero-length input also gives the
    identity.

    Args:
        u: Source direction
        v: Target direction

    Returns:
        scipy Rotation with rotation.apply(u_hat) == v_hat
    """
    u = normalize(u)
    v = normalize(v)
    if np.linalg.norm(u) < GEOM_EPS or np.linalg.norm(v) < GEOM_EPS:
        return Rotation.identity()

    axis = np.cross(u, v)
    sin_a = np.linalg.norm(axis)
    cos_a = float(np.dot(u, v))

    if sin_a < GEOM_EPS:
        if cos_a > 0:
            return Rotation.identity()
        return Rotation.from_rotvec(_perpendicular(u) * np.pi)

    angle = np.arctan2(sin_a, cos_a)
    return Rotation.from_rotvec(axis / sin_a * angle)


@dataclass(frozen=True, eq=False)
class BondPlacement:
    """
    Placement of a cylinder joining two atom positions.

    The cylinder's local axis is the reference axis; `rotation` turns it
    to point from `start` to `end`. A renderer either centers a cylinder
    of height `length` at `midpoint`, or (origin at one endpoint) puts it
    at `anchor` and shifts it half its height along the local axis.
    """

    start: np.ndarray
    end: np.ndarray
    length: float
    midpoint: np.ndarray
    direction: np.ndarray  # Unit vector start -> end, zero when degenerate
    rotation: Rotation
    radius: float = DEFAULT_BOND_RADIUS
    segments: int = DEFAULT_BOND_SEGMENTS

    @property
    def anchor(self) -> np.ndarray:
        """Endpoint the cylinder's local origin sits on."""
        return self.start

    @property
    def is_degenerate(self) -> bool:
        """True when both endpoints coincide."""
        return self.length < GEOM_EPS

    @property
    def euler_angles(self) -> np.ndarray:
        """Rotation as extrinsic x-y-z Euler angles in radians."""
        return self.rotation.as_euler("xyz")

    @property
    def quaternion(self) -> np.ndarray:
        """Rotation as a scalar-last quaternion (x, y, z, w)."""
        return self.rotation.as_quat()

    @property
    def transform(self) -> np.ndarray:
        """4x4 homogeneous matrix: rotate by `rotation`, translate to midpoint."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation.as_matrix()
        matrix[:3, 3] = self.midpoint
        return matrix


def bond_placement(
    a: np.ndarray,
    b: np.ndarray,
    radius: float = DEFAULT_BOND_RADIUS,
    segments: int = DEFAULT_BOND_SEGMENTS,
    axis: np.ndarray = REFERENCE_AXIS,
) -> BondPlacement:
    """
    Compute the placement of a cylinder connecting a to b.

    Coincident points give length 0, a zero direction and the identity
    rotation; no division by zero happens.

    Args:
        a: Start position [x, y, z]
        b: End position [x, y, z]
        radius: Cylinder radius, passed through for the renderer
        segments: Radial segment count, passed through for the renderer
        axis: Local axis of the primitive being placed

    Returns:
        BondPlacement for the a -> b bond
    """
    start = np.asarray(a, dtype=np.float64).reshape(3)
    end = np.asarray(b, dtype=np.float64).reshape(3)

    length = calc_distance(start, end)
    midpoint = (start + end) / 2.0

    if length < GEOM_EPS:
        direction = np.zeros(3)
        rotation = Rotation.identity()
    else:
        direction = (end - start) / length
        rotation = rotation_between(axis, direction)

    return BondPlacement(
        start=start,
        end=end,
        length=length,
        midpoint=midpoint,
        direction=direction,
        rotation=rotation,
        radius=radius,
        segments=segments,
    )


def iter_bond_placements(
    molecule: Molecule,
    unique: bool = True,
    radius: float = DEFAULT_BOND_RADIUS,
    segments: int = DEFAULT_BOND_SEGMENTS,
) -> Iterator[Tuple[Atom, Atom, BondPlacement]]:
    """
    Compute placements for every resolved bond in a molecule.

    Links whose target serial is not in the molecule are skipped (and
    logged), so one bad link never prevents the rest from being placed.

    Args:
        molecule: Parsed molecule
        unique: Yield each unordered atom pair once
        radius: Cylinder radius
        segments: Radial segment count

    Yields:
        (atom, bonded_atom, placement) tuples
    """
    for anchor, target in molecule.unresolved_links():
        logger.debug("Skipping bond %d -> %d: target atom not present", anchor, target)

    pairs = molecule.unique_bonds() if unique else molecule.bonds()
    for atom, target in pairs:
        yield atom, target, bond_placement(
            atom.position, target.position, radius=radius, segments=segments
        )
