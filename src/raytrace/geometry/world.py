# geometry/world.py
from typing import Iterator, List, Optional

from raytrace.core.ray import Ray
from raytrace.geometry.hittable import HitRecord, Hittable


class World(Hittable):
    """
    An ordered list of Hittable objects.

    Lookup is a linear scan over every object; the closest hit wins
    regardless of insertion order.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = []
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        if not isinstance(obj, Hittable):
            raise TypeError(f"World objects must be Hittable, got {type(obj).__name__}")
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.intersect(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
