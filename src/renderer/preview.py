# renderer/preview.py
import os

import numpy as np

# pygame prints a banner to stdout on import, which may be carrying the image.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

def to_surface_array(pixels: np.ndarray) -> np.ndarray:
    """pygame.surfarray indexes [x, y]; the image buffer is [y, x]."""
    return np.ascontiguousarray(np.transpose(pixels, (1, 0, 2)))

def show_preview(pixels: np.ndarray, title: str = "Ray Tracer"):
    """
    Opens a window showing the rendered image until it is closed or
    Escape is pressed.
    """
    height, width, _ = pixels.shape
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        surface = pygame.surfarray.make_surface(to_surface_array(pixels))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
