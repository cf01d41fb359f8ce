"""A pygame window that fractal pixels are drawn into."""

from __future__ import annotations

import pygame

from fractalview.color import BLACK, pixel_color


class RenderWindow:
    """A window with an off-screen canvas that is shown on ``display``."""

    def __init__(self, title: str, width: int, height: int, fullscreen: bool = False):
        if not pygame.display.get_init():
            pygame.display.init()
        self.width = width
        self.height = height
        self._fullscreen = False
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.canvas = pygame.Surface((width, height), 0, 32)
        self.canvas.fill(BLACK)
        if fullscreen:
            self.toggle_fullscreen()
        pygame.mouse.set_visible(True)

    @property
    def fullscreen(self) -> bool:
        """Whether the window currently covers the screen."""
        return self._fullscreen

    def __enter__(self) -> RenderWindow:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def clear(self) -> None:
        """Fill the canvas with black."""
        self.canvas.fill(BLACK)

    def draw(self, x: int, y: int, hue: int, valuehue: int) -> None:
        """Colour one canvas pixel; positions outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.canvas.set_at((x, y), pixel_color(hue, valuehue))

    def display(self) -> None:
        """Show the canvas on screen."""
        self._screen.blit(self.canvas, (0, 0))
        pygame.display.flip()

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen, hiding the cursor in fullscreen."""
        was_fullscreen = self._fullscreen
        flags = 0 if was_fullscreen else pygame.FULLSCREEN
        self._screen = pygame.display.set_mode((self.width, self.height), flags)
        self._fullscreen = not was_fullscreen
        pygame.mouse.set_visible(was_fullscreen)
        self.display()

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()