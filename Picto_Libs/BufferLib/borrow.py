"""
Runtime borrow tracking for write views.

Python has no static aliasing control, so each Buffer owns a BorrowTracker.
Acquiring a write-capable view takes a Lease over the view's window; a second
write view overlapping a live lease is refused with BorrowConflict. Read views
never take leases and may overlap freely.

Narrowing a write view takes a child Lease from the same tracker. A child may
overlap its ancestors but not its siblings, and while a child is live its
parent may not write into the child's region.

A Lease ends when ``release()`` is called, when the view's ``with`` block
exits, or when the lease is garbage collected together with every view
holding it. Releasing a lease also releases its children.
"""

import weakref
from typing import Dict, List, Optional

from Picto_Libs.BufferLib.area import Area
from Picto_Libs.errors import BorrowConflict


class Lease:
    """Exclusive write access to one region of a buffer."""

    def __init__(self, tracker: "BorrowTracker", key: int, area: Area, parent: Optional["Lease"] = None):
        self.key = key
        self.area = area
        self.parent = parent
        self._tracker = tracker
        self._children = weakref.WeakSet()
        self._finalizer = weakref.finalize(self, tracker._release, key)

    @property
    def alive(self) -> bool:
        return self._finalizer.alive

    def narrow(self, area: Area) -> "Lease":
        """
        Take a child lease over ``area`` (owner coordinates).

        Raises:
            BorrowConflict: If this lease was released or a sibling overlaps
        """
        if not self.alive:
            raise BorrowConflict("write view used after release")
        child = self._tracker.acquire(area, parent=self)
        self._children.add(child)
        return child

    def blocked(self, area: Area) -> bool:
        """True if a live child lease overlaps ``area``."""
        return any(child.alive and child.area.overlaps(area) for child in list(self._children))

    def release(self) -> None:
        for child in list(self._children):
            child.release()
        self._finalizer()


class BorrowTracker:
    def __init__(self):
        self._leases: Dict[int, Area] = {}
        self._counter = 0

    def acquire(self, area: Area, parent: Optional[Lease] = None) -> Lease:
        """
        Take a write lease over ``area`` (owner coordinates).

        Args:
            area: Region to lease
            parent: Lease being narrowed; its ancestors do not conflict

        Raises:
            BorrowConflict: If a live lease other than an ancestor overlaps ``area``
        """
        ancestors = set()
        lease = parent
        while lease is not None:
            ancestors.add(lease.key)
            lease = lease.parent

        for key, held in self._leases.items():
            if key not in ancestors and held.overlaps(area):
                raise BorrowConflict(
                    f"region {area} overlaps a live write view over {held}"
                )

        self._counter += 1
        self._leases[self._counter] = area
        return Lease(self, self._counter, area, parent)

    def _release(self, key: int) -> None:
        self._leases.pop(key, None)

    def is_borrowed(self, x: int, y: int) -> bool:
        for held in self._leases.values():
            if held.x <= x < held.x + held.width and held.y <= y < held.y + held.height:
                return True
        return False

    def active(self) -> List[Area]:
        """Areas currently leased for writing."""
        return list(self._leases.values())
