"""Entry point for the house walkthrough."""
from __future__ import annotations

import logging
from typing import Optional

import pygame

from game.assets import AssetBarrier, AssetLoader
from game.config import WalkthroughSettings, configure_logging, load_settings
from game.controls import FreeLookControls, direction_for_key
from game.frame import FrameDriver
from game.movement import MovementController
from game.world import create_world
from rendering.draw_system import SceneRenderer
from rendering.opengl_context import initialize_gl, resize_viewport

logger = logging.getLogger(__name__)

DISPLAY_FLAGS = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE


def _wait_for_assets(barrier: AssetBarrier, renderer: SceneRenderer, camera, clock, fps: int) -> bool:
    """Keep the window responsive until both loads finish; ``False`` on quit."""

    while not barrier.ready():
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        renderer.draw_placeholder(camera)
        pygame.display.flip()
        clock.tick(fps)
    return True


def run(settings: Optional[WalkthroughSettings] = None) -> None:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    pygame.init()
    pygame.display.set_caption("House Walkthrough")
    pygame.display.set_mode(settings.window_size, DISPLAY_FLAGS)
    window_size = pygame.display.get_surface().get_size()
    initialize_gl(window_size)

    world = create_world(settings, window_size)
    renderer = SceneRenderer()
    controls = FreeLookControls()
    movement = MovementController(world)
    driver = FrameDriver(world, renderer.draw_world, controls=controls)
    clock = pygame.time.Clock()

    loader = AssetLoader()
    barrier = AssetBarrier(loader.load(settings.house_asset), loader.load(settings.avatar_asset))
    try:
        if not _wait_for_assets(barrier, renderer, world.camera, clock, settings.target_fps):
            logger.info("Quit before assets finished loading")
            pygame.quit()
            return
        house, avatar = barrier.result()
    finally:
        loader.shutdown()
    world.attach_assets(house, avatar)
    logger.info("Assets ready; starting walkthrough")

    running = True
    while running:
        dt_ms = clock.tick(settings.target_fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                direction = direction_for_key(event.key)
                if direction is not None:
                    movement.apply_directional_input(direction)
            elif event.type == pygame.VIDEORESIZE:
                pygame.display.set_mode(event.size, DISPLAY_FLAGS)
                resize_viewport(event.size)
                world.camera.update_viewport(event.size)
            else:
                controls.handle_event(event)

        driver.tick(float(dt_ms))
        pygame.display.flip()

    logger.info(f"Walkthrough closed after {driver.frame_count} frames")
    pygame.quit()


if __name__ == "__main__":
    run()
