"""Component aggregates.

Re-exports the value components shared by the grid, the traversal state and
the generator.
"""

from .position import Position

__all__ = ["Position"]
