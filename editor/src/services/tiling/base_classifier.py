"""Base class for tiling classifiers.

A classifier describes the symmetry structure of one prototile:
- Which distinct edge shapes exist and their symmetry class
- Where each edge occurrence is placed around the boundary
- The shape-family parameters that move the prototile's vertices
- How copies of the prototile fill the plane
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Tuple

from models.edge_curves import EdgeShapeClass
from models.transform import Affine


@dataclass
class EdgeOccurrence:
    """One placed instance of an edge shape on the prototile boundary.

    The transform maps the edge's local frame ((0,0)-(1,0)) into prototile
    coordinates. `reversed` means the boundary walks the edge from local
    (1,0) to (0,0). `second` marks the complementary occurrence of a
    symmetric edge.
    """
    edge_id: int
    shape_class: EdgeShapeClass
    second: bool
    reversed: bool
    transform: Affine


@dataclass
class TilePlacement:
    """One copy of the prototile in the tiling.

    t1, t2 are the copy's translation lattice coordinates and aspect its
    index among the copies sharing one lattice cell.
    """
    transform: Affine
    t1: int
    t2: int
    aspect: int


class TilingClassifier(ABC):
    """Abstract base class for tiling classifiers.

    Subclasses must implement:
    - get_name(): Internal identifier (e.g., "parallelogram")
    - get_display_name(): UI display name
    - edge_shape_list(): (edge_id, EdgeShapeClass) pairs
    - boundary_occurrences(): EdgeOccurrence list tracing the boundary once
    - parameter_count() / get_parameters() / set_parameters()
    - fill_region(): TilePlacement list covering a region
    - get_colour(): Colour index of a placement
    """

    def __init__(self):
        self._on_change_callback = None

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        pass

    @abstractmethod
    def edge_shape_list(self) -> List[Tuple[int, EdgeShapeClass]]:
        """Return the distinct edge shapes of the prototile.

        Stable for a given prototile configuration.
        """
        pass

    @abstractmethod
    def boundary_occurrences(self) -> List[EdgeOccurrence]:
        """Return the edge occurrences in boundary order (one full loop)."""
        pass

    @abstractmethod
    def parameter_count(self) -> int:
        pass

    @abstractmethod
    def get_parameters(self) -> List[float]:
        """Return a copy of the shape-family parameters."""
        pass

    @abstractmethod
    def set_parameters(self, values: List[float]):
        pass

    @abstractmethod
    def fill_region(self, bounds) -> List[TilePlacement]:
        """Return the prototile copies needed to cover bounds.

        Args:
            bounds: BoundingBox in prototile coordinates
        """
        pass

    @abstractmethod
    def get_colour(self, t1: int, t2: int, aspect: int) -> int:
        """Colour index for a placement, differing between neighbours."""
        pass

    def set_change_callback(self, callback: Callable):
        """Set callback to be called when parameters change.

        Args:
            callback: Function to call with no arguments when params change
        """
        self._on_change_callback = callback

    def _notify_changed(self):
        if self._on_change_callback:
            self._on_change_callback()
