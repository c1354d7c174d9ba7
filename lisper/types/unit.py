from __future__ import annotations


class UnitType:
    """Result of definitions; means "no useful value", never an error."""

    __slots__ = ()

    def __repr__(self): return "Unit"
    def __str__(self): return "-=-"

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash("unit")


Unit = UnitType()
