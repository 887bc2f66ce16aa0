"""Sphere colliders and pairwise collision dispatch."""

from __future__ import annotations

from enum import IntEnum
from itertools import combinations

from .collision import is_collision
from .global_variables import GlobalVariables
from .shapes import Sphere
from .vector import Vector3

GROUP_NAME = "Colliders"
DRAW_COLLIDER_KEY = "isDrawCollider"


class CollisionTypeId(IntEnum):
    """Kinds of object taking part in collisions."""

    DEFAULT = 0
    PLAYER = 1
    ENEMY = 2
    PLAYER_BULLET = 3
    ENEMY_BULLET = 4


class Collider:
    """An object with a collision sphere; subclasses react in :meth:`on_collision`."""

    def __init__(
        self,
        center: Vector3 = Vector3(),
        radius: float = 1.0,
        type_id: int = CollisionTypeId.DEFAULT,
    ) -> None:
        self.center = center
        self.radius = radius
        self.type_id = type_id

    @property
    def scale(self) -> Vector3:
        """Scale of a unit sphere drawn to show the collider."""
        return Vector3(self.radius, self.radius, self.radius)

    @property
    def sphere(self) -> Sphere:
        return Sphere(self.center, self.radius)

    def on_collision(self, other: Collider) -> None:
        """Called when this collider touches ``other``; does nothing by default."""


class CollisionManager:
    """Checks every registered pair of colliders against each other."""

    def __init__(self, global_variables: GlobalVariables | None = None) -> None:
        self._colliders: list[Collider] = []
        self._global_variables = global_variables
        if global_variables is not None:
            global_variables.create_group(GROUP_NAME)
            global_variables.add_item(GROUP_NAME, DRAW_COLLIDER_KEY, True)

    @property
    def colliders(self) -> tuple[Collider, ...]:
        return tuple(self._colliders)

    @property
    def is_draw_collider(self) -> bool:
        """Whether collider spheres should be drawn."""
        if self._global_variables is None:
            return True
        return self._global_variables.get_bool_value(GROUP_NAME, DRAW_COLLIDER_KEY)

    def reset(self) -> None:
        """Forget every registered collider."""
        self._colliders.clear()

    def add_collider(self, collider: Collider) -> None:
        self._colliders.append(collider)

    def check_all_collisions(self) -> list[tuple[Collider, Collider]]:
        """Notify both colliders of every touching pair and return the pairs."""
        hits = []
        for a, b in combinations(self._colliders, 2):
            if is_collision(a.sphere, b.sphere):
                a.on_collision(b)
                b.on_collision(a)
                hits.append((a, b))
        return hits