"""Smooth-shaded triangle meshes and the bounding volume hierarchy behind them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from prismtrace.aabb import AABB, Primitive
from prismtrace.hit import HitRecord
from prismtrace.interval import Interval
from prismtrace.materials import Material
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D

_EPSILON = 0.00001
_FAR = 1e30

Triple = tuple[Vector3D, Vector3D, Vector3D]


@dataclass(eq=False)
class SmoothTriangle(Primitive):
    """A triangle whose normal is interpolated from per-vertex normals."""

    vertices: Triple
    normals: Triple
    material: Optional[Material] = None

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        v0, v1, v2 = self.vertices
        edge1 = v1 - v0
        edge2 = v2 - v0
        pvec = ray.direction.cross(edge2)
        det = edge1.dot(pvec)
        if -_EPSILON < det < _EPSILON:
            return None
        inv_det = 1.0 / det
        tvec = ray.origin - v0
        u = inv_det * tvec.dot(pvec)
        if u < 0.0 or u > 1.0:
            return None
        qvec = tvec.cross(edge1)
        v = inv_det * ray.direction.dot(qvec)
        if v < 0.0 or u + v > 1.0:
            return None
        t = inv_det * edge2.dot(qvec)
        if t > _EPSILON and ray_t.surrounds(t):
            n0, n1, n2 = self.normals
            normal = n0 * (1 - u - v) + n1 * u + n2 * v
            return HitRecord(t=t, p=ray.at(t), normal=normal, material=self.material)
        return None

    def bounding_box(self) -> AABB:
        corners = tuple(zip(*self.vertices))
        return AABB(Point3D(*map(min, corners)), Point3D(*map(max, corners)))

    def centroid(self) -> Point3D:
        v0, v1, v2 = self.vertices
        return (v0 + v1 + v2) / 3


@dataclass
class _Node:
    bounds: AABB
    primitives: list[Primitive] = field(default_factory=list)
    children: Optional[tuple[_Node, _Node]] = None


def _enclose(primitives: Iterable[Primitive]) -> AABB:
    box = AABB(Point3D(_FAR, _FAR, _FAR), Point3D(-_FAR, -_FAR, -_FAR))
    for primitive in primitives:
        leaf = primitive.bounding_box()
        box.grow(leaf.min)
        box.grow(leaf.max)
    return box


class BVH:
    """A bounding volume hierarchy over a list of primitives."""

    def __init__(self, primitives: Iterable[Primitive] = ()) -> None:
        self.primitives: list[Primitive] = list(primitives)
        self._root: Optional[_Node] = None

    def build(self) -> None:
        """(Re)build the hierarchy from the current primitives."""
        self._root = self._make_node(list(self.primitives))

    def _make_node(self, primitives: list[Primitive]) -> _Node:
        bounds = _enclose(primitives)
        if len(primitives) <= 2:
            return _Node(bounds, primitives)
        extent = bounds.max - bounds.min
        axis = 0
        if extent.y > extent.x:
            axis = 1
        if extent.z > extent[axis]:
            axis = 2
        split = bounds.min[axis] + extent[axis] * 0.5
        left = [p for p in primitives if p.centroid()[axis] < split]
        right = [p for p in primitives if not p.centroid()[axis] < split]
        if not left or not right:
            return _Node(bounds, primitives)
        return _Node(bounds, children=(self._make_node(left), self._make_node(right)))

    def _tree(self) -> _Node:
        if self._root is None:
            self.build()
        return self._root

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """The nearest intersection within ``ray_t``, or None."""
        best: Optional[HitRecord] = None
        closest = ray_t.max
        stack = [self._tree()]
        while stack:
            node = stack.pop()
            if not node.bounds.hits(ray, closest):
                continue
            if node.children is not None:
                stack.extend(reversed(node.children))
                continue
            for primitive in node.primitives:
                rec = primitive.hits(ray, Interval(ray_t.min, closest))
                if rec is not None:
                    best = rec
                    closest = rec.t
        return best

    def bounding_box(self) -> AABB:
        bounds = self._tree().bounds
        return AABB(bounds.min, bounds.max)

    def centroid(self) -> Point3D:
        return self._tree().bounds.centroid()


class MeshObject(BVH, Primitive):
    """A mesh of smooth triangles loaded from a model file."""

    def __init__(self, origin: Point3D, scale: float, material: Optional[Material] = None) -> None:
        super().__init__()
        self.origin = origin
        self.scale = scale
        self.material = material

    @property
    def triangles(self) -> tuple[Primitive, ...]:
        return tuple(self.primitives)

    def add_triangle(self, triangle: SmoothTriangle) -> None:
        self.primitives.append(triangle)
        self._root = None

    def hits(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        return super().hits(ray, ray_t)

    def bounding_box(self) -> AABB:
        return super().bounding_box()

    def centroid(self) -> Point3D:
        return super().centroid()