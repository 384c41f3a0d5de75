"""
In-memory catalog of celestial bodies.

The catalog owns every body. Each stored body gets an integer handle; parent
to child edges are recorded between handles, so they do not depend on the
per-kind name index.
"""

import bisect
import logging
from typing import Dict, List, Optional, Tuple

from galaxy_db.exceptions import DuplicateBodyError, UnknownBodyError
from galaxy_db.models import AnyBody, BodyKind, CelestialBody

logger = logging.getLogger(__name__)


class Catalog:
    """
    Hierarchical record store indexed by kind and name.
    """

    def __init__(self) -> None:
        """
        Initialize an empty catalog.
        """
        self._bodies: List[CelestialBody] = []
        self._by_name: Dict[BodyKind, Dict[str, int]] = {kind: {} for kind in BodyKind}
        self._sorted_names: Dict[BodyKind, List[str]] = {kind: [] for kind in BodyKind}
        self._children: Dict[int, List[int]] = {}

    def __len__(self) -> int:
        return len(self._bodies)

    def add(self, body: AnyBody, parent: Optional[AnyBody] = None) -> int:
        """Store a body, optionally linking it under a parent.

        Args:
            body: The body to store
            parent: A body already stored in the catalog, or None for a root

        Returns:
            The handle assigned to the new body

        Raises:
            DuplicateBodyError: A body of the same kind already has this name
            UnknownBodyError: The parent is not stored in the catalog
        """
        index = self._by_name[body.kind]
        if body.name in index:
            logger.warning(f"Rejected duplicate {body.kind.value}: {body.name}")
            raise DuplicateBodyError(body.kind, body.name)

        parent_handle = None
        if parent is not None:
            parent_handle = self.handle_of(parent)
            if parent_handle is None:
                raise UnknownBodyError(parent.kind, parent.name)

        handle = len(self._bodies)
        self._bodies.append(body)
        index[body.name] = handle
        bisect.insort(self._sorted_names[body.kind], body.name)

        if parent_handle is not None:
            self._children.setdefault(parent_handle, []).append(handle)
            logger.debug(
                f"Added {body.kind.value} {body.name} (#{handle}) under "
                f"{parent.kind.value} {parent.name} (#{parent_handle})"
            )
        else:
            logger.debug(f"Added {body.kind.value} {body.name} (#{handle})")
        return handle

    def list_names(self, kind: BodyKind) -> List[str]:
        """Get all names of a kind in ascending order."""
        logger.debug(f"list_names() called with {kind.value}")
        return list(self._sorted_names[kind])

    def find(self, kind: BodyKind, name: str) -> Optional[AnyBody]:
        """Retrieve a body by exact name within its kind.

        Returns:
            The stored body, or None if no body of that kind has the name
        """
        handle = self._by_name[kind].get(name)
        return self._bodies[handle] if handle is not None else None

    def handle_of(self, body: CelestialBody) -> Optional[int]:
        """Get the handle of a stored body, or None if the body is not stored."""
        handle = self._by_name[body.kind].get(body.name)
        if handle is None or self._bodies[handle] != body:
            return None
        return handle

    def children_of(self, parent: CelestialBody) -> Optional[Tuple[AnyBody, ...]]:
        """Get the children of a body in the order they were added.

        Returns:
            The children, or None if no child was ever added under the parent
        """
        handle = self.handle_of(parent)
        if handle is None or handle not in self._children:
            return None
        return tuple(self._bodies[h] for h in self._children[handle])

    def count(self, kind: BodyKind) -> int:
        return len(self._by_name[kind])

    def stats(self) -> Dict[BodyKind, int]:
        """Get the number of stored bodies of every kind."""
        return {kind: self.count(kind) for kind in BodyKind}
