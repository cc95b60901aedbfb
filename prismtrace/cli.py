"""The command-line renderer and its interactive viewer."""

from __future__ import annotations

import sys
import time
from typing import Optional, Sequence

from prismtrace.arguments import Parameters
from prismtrace.camera import Camera
from prismtrace.factories import create_camera
from prismtrace.image import IncrementalImage
from prismtrace.observer import FileObserver
from prismtrace.scene_file import get_path, load_scene
from prismtrace.vector import Vector3D
from prismtrace.world import World
from prismtrace.world_creator import WorldCreator

_SPEED = 0.5
_FONT_FILE = "assets/font/BebasNeue-Regular.ttf"
_FRAME_TIME_MS = 200.0

_MOVES = {
    "down": Vector3D(0, 0, _SPEED),
    "s": Vector3D(0, 0, _SPEED),
    "up": Vector3D(0, 0, -_SPEED),
    "z": Vector3D(0, 0, -_SPEED),
    "right": Vector3D(-_SPEED, 0, 0),
    "d": Vector3D(-_SPEED, 0, 0),
    "left": Vector3D(_SPEED, 0, 0),
    "q": Vector3D(_SPEED, 0, 0),
    "space": Vector3D(0, _SPEED, 0),
    "lshift": Vector3D(0, -_SPEED, 0),
}
_TURNS = {
    "j": Vector3D(-_SPEED, 0, 0),
    "l": Vector3D(_SPEED, 0, 0),
    "i": Vector3D(0, _SPEED, 0),
    "k": Vector3D(0, -_SPEED, 0),
}

_USAGE = (
    "Options:\n"
    "  -gui: Open a window to render the scene in real time\n"
    "  -o [outputfile]: Save the rendered image to the specified file (BMP, PPM, PNG, TGA, "
    "JPG), default is output.bmp. If -gui is set, the image will be saved when the window "
    "is closed.The file extension will determine the format."
)


def apply_key(camera: Camera, key: Optional[str]) -> bool:
    """Apply a named key press to ``camera``; True if the view changed."""
    if key in _MOVES:
        camera.move(_MOVES[key])
        return True
    if key in _TURNS:
        camera.rotate(_TURNS[key])
        return True
    if key == "add":
        camera.vfov -= 1
        camera.update()
        return True
    if key == "subtract":
        camera.vfov += 1
        camera.update()
        return True
    return False


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def _load_font(pygame, size: int):
    try:
        return pygame.font.Font(_FONT_FILE, size)
    except OSError:
        return pygame.font.Font(None, size)


class Application:
    """Parses options, loads the scene and renders it to a file or a window."""

    def __init__(self, argv: Optional[Sequence[str]] = None, prog: str = "prismtrace") -> None:
        self.argv = list(sys.argv[1:] if argv is None else argv)
        self.prog = prog
        self.params = Parameters()
        self.camera = Camera()
        self.world = World()
        self.image = IncrementalImage()

    def arg_parse(self) -> bool:
        try:
            self.params.load(self.argv)
        except Exception as exc:
            print(exc, file=sys.stderr)
            print(f"Usage: {self.prog} [scene file]", file=sys.stderr)
            print(_USAGE, file=sys.stderr)
            return False
        return True

    def run(self) -> int:
        creator = WorldCreator()
        scene_file = self.params.scene_file
        tree = load_scene(scene_file)
        creator.opened_files.append(scene_file)
        creator.root_file = scene_file
        creator.create_world(self.world, tree)
        creator.attach(FileObserver(creator.opened_files))
        self.camera = create_camera(get_path(tree, "camera"))

        if self.params.gui:
            self.render_real_time(creator)
        if self.params.output_file:
            if not self.params.gui:
                self.camera.render(self.world, self.image)
            self.image.save(self.params.output_file)
        return 0

    def render_real_time(self, creator: WorldCreator) -> None:
        """Show a window that refines the image progressively until closed."""
        import pygame

        camera = self.camera
        camera.update()
        pygame.init()
        try:
            mode = pygame.RESIZABLE
            screen = pygame.display.set_mode((camera.image_width, camera.image_height), mode)
            pygame.display.set_caption("Raytracer")
            font = _load_font(pygame, max(20, camera.image_height // 40))
            keys = {
                pygame.K_ESCAPE: "escape",
                pygame.K_DOWN: "down", pygame.K_s: "s",
                pygame.K_UP: "up", pygame.K_z: "z",
                pygame.K_RIGHT: "right", pygame.K_d: "d",
                pygame.K_LEFT: "left", pygame.K_q: "q",
                pygame.K_SPACE: "space", pygame.K_LSHIFT: "lshift",
                pygame.K_KP_PLUS: "add", pygame.K_KP_MINUS: "subtract",
                pygame.K_j: "j", pygame.K_l: "l", pygame.K_i: "i", pygame.K_k: "k",
            }
            camera.samples_per_pixel = 1
            camera.max_depth = 5
            start = _now_ms()
            elapsed = 0
            running = True
            while running:
                moved = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        camera.image_width = event.w
                        camera.aspect_ratio = event.w / event.h
                        camera.update()
                        moved = True
                    elif event.type == pygame.KEYDOWN:
                        name = keys.get(event.key)
                        if name == "escape":
                            running = False
                            moved = False
                        else:
                            moved = apply_key(camera, name)
                if not running:
                    break
                if moved or creator.update_on_file_change(self.world, camera):
                    self.image.clear()
                    camera.max_depth = 5
                    start = _now_ms()
                    elapsed = 0
                    camera.samples_per_pixel = 1
                    font = _load_font(pygame, max(20, camera.image_height // 40))
                    screen = pygame.display.set_mode(
                        (camera.image_width, camera.image_height), mode
                    )
                if camera.samples_per_pixel > 10:
                    camera.max_depth += 1
                camera.render(self.world, self.image, show_progress=False)

                old_elapsed = elapsed
                elapsed = _now_ms() - start
                frame_time = float(elapsed - old_elapsed)
                if frame_time <= 2:
                    frame_time = _FRAME_TIME_MS
                lines = [
                    f"TT Render Time: {elapsed / 1000:.2f}s",
                    f"TT Sample per pixel: {self.image.sample_count}",
                    f"Depth: {camera.max_depth}",
                    f"Sample per pixel: {camera.samples_per_pixel}",
                    f"Camera Position: {camera.origin}",
                    f"Camera LookAt: {camera.lookat}",
                ]

                screen.fill((0, 0, 0))
                picture = pygame.image.frombuffer(
                    self.image.pixels, (self.image.width, self.image.height), "RGBA"
                )
                screen.blit(picture, (0, 0))
                y = 10
                for line in lines:
                    screen.blit(font.render(line, True, (255, 255, 255)), (10, y))
                    y += font.get_linesize()
                pygame.display.flip()

                speed_factor = _FRAME_TIME_MS / frame_time
                camera.samples_per_pixel = max(1, int(camera.samples_per_pixel * speed_factor))
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    app = Application(argv)
    try:
        if not app.arg_parse():
            return 84
        return app.run()
    except Exception as exc:
        print(exc, file=sys.stderr)
        return 84


if __name__ == "__main__":
    sys.exit(main())