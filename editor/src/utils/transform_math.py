"""
Prototile Edge Editor - Affine Transform Utilities

Pure 2D affine algebra on 6-tuples (see models.transform.Affine).
Used to place edges around the prototile, to fit the prototile into the
editor viewport and to map pointer positions back into edge space.
"""

from models.transform import Affine, Vec2


IDENTITY: Affine = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


def compose(A, B):
    """Return the transform that applies B first, then A.

    Args:
        A: Outer affine transform
        B: Inner affine transform

    Returns:
        Affine equivalent to A(B(p))
    """
    return (
        A[0] * B[0] + A[1] * B[3],
        A[0] * B[1] + A[1] * B[4],
        A[0] * B[2] + A[1] * B[5] + A[2],
        A[3] * B[0] + A[4] * B[3],
        A[3] * B[1] + A[4] * B[4],
        A[3] * B[2] + A[4] * B[5] + A[5],
    )


def apply(T, point):
    """Map a point (Vec2 or (x, y) pair) through T. Returns a new Vec2."""
    x, y = point
    return Vec2(T[0] * x + T[1] * y + T[2], T[3] * x + T[4] * y + T[5])


def determinant(T):
    return T[0] * T[4] - T[1] * T[3]


def invert(T):
    """Return the inverse of T.

    Raises:
        ValueError: If T is singular
    """
    det = determinant(T)
    if det == 0.0:
        raise ValueError(f"Cannot invert singular transform {T}")
    return (
        T[4] / det,
        -T[1] / det,
        (T[1] * T[5] - T[2] * T[4]) / det,
        -T[3] / det,
        T[0] / det,
        (T[2] * T[3] - T[0] * T[5]) / det,
    )


def translation(tx, ty):
    return (1.0, 0.0, tx, 0.0, 1.0, ty)


def scaling(sx, sy):
    return (sx, 0.0, 0.0, 0.0, sy, 0.0)


def segment_frame(start, end):
    """Similarity transform taking the unit edge (0,0)-(1,0) onto start-end.

    Args:
        start: Image of (0, 0)
        end: Image of (1, 0)

    Returns:
        Affine mapping local edge coordinates into the segment's space
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    return (dx, -dy, start[0], dy, dx, start[1])
