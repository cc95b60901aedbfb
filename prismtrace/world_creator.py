"""Filling a world from scene files and reloading it when they change."""

from __future__ import annotations

import sys
from dataclasses import fields
from typing import Any, Callable, Iterable

from prismtrace.camera import Camera
from prismtrace.factories import _str, create_camera
from prismtrace.observer import FileObserver
from prismtrace.quadric_factories import create_cone, create_cylinder
from prismtrace.scene_file import get_path, load_scene
from prismtrace.shape_factories import create_obj, create_plane, create_sphere, create_triangle
from prismtrace.world import World

_BUILDERS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("spheres", create_sphere),
    ("triangles", create_triangle),
    ("planes", create_plane),
    ("objects", create_obj),
    ("cones", create_cone),
    ("cylinders", create_cylinder),
)


def _children(node: Any) -> Iterable[Any]:
    if isinstance(node, list):
        return node
    if isinstance(node, dict):
        return node.values()
    return ()


def _copy_camera(target: Camera, source: Camera) -> None:
    for item in fields(source):
        setattr(target, item.name, getattr(source, item.name))


class WorldCreator:
    """Builds worlds from scene trees, following included scene files once each."""

    def __init__(self, root_file: str = "") -> None:
        self.opened_files: list[str] = []
        self.root_file = root_file
        self.observers: list[FileObserver] = []

    def create_world(self, world: World, tree: Any) -> None:
        """Add the primitives of ``tree`` and of the scenes it includes to ``world``."""
        primitives = get_path(tree, "primitives")
        for scene in _children(get_path(tree, "scenes")):
            file_name = _str(scene, "path")
            if file_name in self.opened_files:
                continue
            included = load_scene(file_name)
            self.opened_files.append(file_name)
            self.create_world(world, included)
        for key, build in _BUILDERS:
            for child in _children(get_path(primitives, key)):
                world.add_primitive(build(child))

    def destroy_world(self, world: World) -> None:
        world.clear()
        self.opened_files = [self.root_file]

    def update_on_file_change(self, world: World, camera: Camera) -> bool:
        """Reload world and camera if a watched file changed; True if reloaded."""
        modified = False
        for observer in self.observers:
            modified = observer.update(self.opened_files) or modified
        if modified:
            try:
                tree = load_scene(self.root_file)
                self.destroy_world(world)
                self.create_world(world, tree)
                _copy_camera(camera, create_camera(get_path(tree, "camera")))
                camera.update()
            except Exception as exc:  # a broken scene must not stop the viewer
                print(exc, file=sys.stderr)
                return False
        return modified

    def attach(self, observer: FileObserver) -> None:
        self.observers.append(observer)

    def detach(self, observer: FileObserver) -> None:
        self.observers = [o for o in self.observers if o is not observer]