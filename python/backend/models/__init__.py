from backend.models.grid import BLANK, Grid
from backend.models.move import MoveDescriptor, MoveName

__all__ = ["BLANK", "Grid", "MoveDescriptor", "MoveName"]
