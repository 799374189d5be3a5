# chesser/app.py
from __future__ import annotations
import logging
import pygame
from chesser import settings
from chesser.scenes.board import BoardScene

log = logging.getLogger(__name__)

def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)

    pygame.init()
    pygame.display.set_caption(settings.WINDOW_TITLE)
    screen = pygame.display.set_mode(settings.SCREEN_SIZE)
    clock = pygame.time.Clock()
    log.info("board %dx%d", settings.GRID_SIZE, settings.GRID_SIZE)

    scene = BoardScene(screen)

    running = True
    while running:
        # -- Input --
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                scene.handle_event(event)

        # -- Update --
        dt = clock.tick(settings.FPS) / 1000.0
        scene.update(dt)

        # -- Render --
        scene.draw(screen)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
