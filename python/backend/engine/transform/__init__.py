from backend.engine.transform.applier import apply_move, destinations, permute
from backend.engine.transform.catalog import (
    CATALOG,
    get_move,
    inverse_of,
    symmetric,
    wrap,
)

__all__ = [
    "CATALOG",
    "apply_move",
    "destinations",
    "get_move",
    "inverse_of",
    "permute",
    "symmetric",
    "wrap",
]
