"""
Prototile Edge Editor - Geometry Helpers

Vector helpers, point-to-segment distance, cubic Bezier evaluation and
axis-aligned box hit testing. Points may be Vec2 or plain (x, y) pairs;
results that are points are returned as Vec2.
"""

import math

from models.transform import Vec2


def sub(V, W):
    return Vec2(V[0] - W[0], V[1] - W[1])


def dot(V, W):
    return V[0] * W[0] + V[1] * W[1]


def length(V):
    return math.sqrt(dot(V, V))


def distance(V, W):
    return length(sub(V, W))


def normalize(V):
    l = length(V)
    return Vec2(V[0] / l, V[1] / l)


def distance_to_segment(P, A, B):
    """Shortest distance from point P to line segment AB.

    The projection of P onto AB is clamped to the segment, so points beyond
    either end measure their distance to that endpoint.
    """
    AB = sub(B, A)
    denom = dot(AB, AB)
    if denom == 0.0:
        # Zero-length segment
        return distance(P, A)

    t = dot(sub(P, A), AB) / denom
    if t < 0.0:
        return distance(P, A)
    if t > 1.0:
        return distance(P, B)
    return distance(P, (A[0] + t * AB[0], A[1] + t * AB[1]))


def evaluate_cubic(P0, P1, P2, P3, t):
    """Evaluate a cubic Bezier in Bernstein form at parameter t in [0, 1]."""
    it = 1.0 - t
    it2 = it * it
    t2 = t * t

    b0 = it2 * it
    b1 = 3.0 * it2 * t
    b2 = 3.0 * it * t2
    b3 = t2 * t

    return Vec2(
        b0 * P0[0] + b1 * P1[0] + b2 * P2[0] + b3 * P3[0],
        b0 * P0[1] + b1 * P1[1] + b2 * P2[1] + b3 * P3[1],
    )


def make_box(x, y, w, h):
    """Axis-aligned box as a dict with top-left corner and size."""
    return {'x': x, 'y': y, 'w': w, 'h': h}


def point_in_box(x, y, box):
    """Inclusive containment test against a box from make_box()."""
    return (box['x'] <= x <= box['x'] + box['w']
            and box['y'] <= y <= box['y'] + box['h'])
