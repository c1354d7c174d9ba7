from lisper.types.symbol import Name, Symbol, Operator, Keyword, If, IfMarker
from lisper.types.unit import Unit, UnitType
from lisper.types.environment import Environment
from lisper.types.closure import Closure

__all__ = [
    "Name",
    "Symbol",
    "Operator",
    "Keyword",
    "If",
    "IfMarker",
    "Unit",
    "UnitType",
    "Environment",
    "Closure",
]
