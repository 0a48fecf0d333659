from modulo_krinkle.config import TilingConfig
from modulo_krinkle.directions import DirectionSequence
from modulo_krinkle.errors import ParameterError
from modulo_krinkle.geometry import Point2D
from modulo_krinkle.tile import BoundaryEdge, ReplicaTile, Tile, TileType
from modulo_krinkle.tiling import Tiling
from modulo_krinkle.wedge import ReplicaWedge, Wedge

__all__ = [
    "BoundaryEdge",
    "DirectionSequence",
    "ParameterError",
    "Point2D",
    "ReplicaTile",
    "ReplicaWedge",
    "Tile",
    "TileType",
    "Tiling",
    "TilingConfig",
    "Wedge",
]
