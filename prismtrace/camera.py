"""A perspective camera that renders a world into an image."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from prismtrace import rng
from prismtrace.color import Color
from prismtrace.image import Image, IncrementalImage
from prismtrace.interval import Interval
from prismtrace.ray import Ray
from prismtrace.vector import Point3D, Vector3D, degrees_to_radians
from prismtrace.world import World

_SHADOW_ACNE = 0.001


@dataclass(eq=False)
class Camera:
    """Camera settings plus the viewport derived from them by ``update``."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10
    background: Color = field(default_factory=Color)
    vfov: float = 90.0
    origin: Point3D = field(default_factory=lambda: Point3D(0, 0, 0))
    lookat: Point3D = field(default_factory=lambda: Point3D(0, 0, -1))
    vup: Vector3D = field(default_factory=lambda: Vector3D(0, 1, 0))
    brightness: float = 1.0
    defocus_angle: float = 0.0
    focus_dist: float = 10.0
    image_height: int = 0

    pixel_samples_scale: float = field(default=0.0, init=False)
    center: Point3D = field(default_factory=Point3D, init=False)
    pixel_delta_u: Vector3D = field(default_factory=Vector3D, init=False)
    pixel_delta_v: Vector3D = field(default_factory=Vector3D, init=False)
    pixel00_loc: Point3D = field(default_factory=Point3D, init=False)
    defocus_disk_u: Vector3D = field(default_factory=Vector3D, init=False)
    defocus_disk_v: Vector3D = field(default_factory=Vector3D, init=False)

    def update(self) -> None:
        """Recompute the image height and viewport from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.origin

        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        w = (self.origin - self.lookat).unit()
        u = self.vup.cross(w).unit()
        v = w.cross(u)

        viewport_u = u * viewport_width
        viewport_v = -v * viewport_height
        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        upper_left = self.center - w * self.focus_dist - viewport_u / 2 - viewport_v / 2
        self.pixel00_loc = upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = u * defocus_radius
        self.defocus_disk_v = v * defocus_radius

    def move(self, direction: Vector3D) -> None:
        self.origin = self.origin + direction

    def rotate(self, offset: Vector3D) -> None:
        """Shift the point the camera looks at."""
        self.lookat = self.lookat + offset

    def new_ray(self, u: float, v: float) -> Ray:
        """A ray through a random point of pixel ``(u, v)``."""
        ox = rng.gen_float() - 0.5
        oy = rng.gen_float() - 0.5
        sample = (
            self.pixel00_loc + self.pixel_delta_u * (u + ox) + self.pixel_delta_v * (v + oy)
        )
        return Ray(self.center, sample - self.center)

    def ray_color(self, ray: Ray, depth: int, world: World) -> Color:
        """Radiance carried back along ``ray`` with at most ``depth`` bounces."""
        if depth <= 0:
            return Color(0, 0, 0)
        rec = world.hits(ray, Interval(_SHADOW_ACNE, math.inf))
        if rec is None:
            return self.background
        if rec.material is None:
            return Color(0, 0, 0)
        emission = rec.material.emitted(rec.u, rec.v, rec.p)
        scattered = rec.material.scatter(ray, rec)
        if scattered is None:
            return emission
        attenuation, bounce = scattered
        return emission + self.ray_color(bounce, depth - 1, world) * attenuation * self.brightness

    def render(
        self, world: World, image: Image | IncrementalImage, show_progress: bool = True
    ) -> None:
        """Render one frame of ``world`` into ``image``."""
        self.update()
        image.resize(self.image_width, self.image_height)
        if show_progress:
            sys.stderr.write("\rRendering: 0.00%")
            sys.stderr.flush()
        height = image.height
        for j in range(height):
            for i in range(image.width):
                total = Color(0, 0, 0)
                for _ in range(self.samples_per_pixel):
                    total = total + self.ray_color(self.new_ray(i, j), self.max_depth, world)
                image.set_pixel(
                    i, j, total * self.pixel_samples_scale,
                    self.samples_per_pixel, float(self.max_depth),
                )
            if show_progress:
                percent = 100.0 * (j + 1) / max(height - 1, 1)
                sys.stderr.write(f"\rRendering: {percent:.2f}%")
                sys.stderr.flush()
        if show_progress:
            sys.stderr.write("\n")
        image.finish_frame(self.samples_per_pixel, float(self.max_depth))