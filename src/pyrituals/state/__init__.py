"""State layer.

Holds the single hub snapshot. Snapshots are only ever replaced whole by a
successful pull; nothing in the library edits one in place.
"""

from pyrituals.state.synchronizer import StateSynchronizer

__all__ = ["StateSynchronizer"]
