# geometry/bvh.py
import logging
from typing import List, Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import SceneConstructionError
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


def _require_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise SceneConstructionError(
            f"{obj!r} has no bounding box over [{time0}, {time1}] and cannot be placed in a BVH"
        )
    return box


class BVHNode(Hittable):
    """
    Binary bounding-volume hierarchy node.

    Built once over the primitives by splitting on a randomly chosen axis,
    sorted by the minimum corner of each primitive's box. Leaves are the
    primitives themselves; a node over a single primitive aliases it on
    both sides.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float, time1: float, rng):
        objects = list(objects)
        if not objects:
            raise SceneConstructionError("Cannot build a BVH over an empty set of objects")

        axis = rng.randrange(3)
        boxes = {id(obj): _require_box(obj, time0, time1) for obj in objects}
        objects.sort(key=lambda obj: boxes[id(obj)].minimum[axis])

        object_span = len(objects)
        if object_span == 1:
            self.left = self.right = objects[0]
        elif object_span == 2:
            self.left = objects[0]
            self.right = objects[1]
        else:
            mid = object_span // 2
            self.left = BVHNode(objects[:mid], time0, time1, rng)
            self.right = BVHNode(objects[mid:], time0, time1, rng)

        self.axis = axis
        self.box = AABB.surrounding_box(
            _require_box(self.left, time0, time1),
            _require_box(self.right, time0, time1),
        )

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        # The random split gives no front-to-back order, so both sides are
        # always searched; the left hit only narrows the right's interval.
        hit_left = self.left.hit(ray, t_min, t_max)
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)

        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def leaves(self) -> List[Hittable]:
        """Distinct primitives under this node, left to right."""
        found = []
        for child in (self.left, self.right) if self.left is not self.right else (self.left,):
            if isinstance(child, BVHNode):
                found.extend(child.leaves())
            else:
                found.append(child)
        return found


def build_bvh(objects: Sequence[Hittable], time0: float, time1: float, rng) -> BVHNode:
    """Build a BVH over `objects` and log its shape."""
    root = BVHNode(objects, time0, time1, rng)
    logger.info("Built BVH over %d primitives (depth %d, bounds %r)",
                len(objects), root.depth(), root.box)
    return root
