#surface.py

import math
import pygame
import pygame.gfxdraw
import constants as C

def to_rgba(color):
    """
    Converts an (r, g, b) or (r, g, b, alpha) color with alpha in [0, 1]
    into an (r, g, b, a) tuple with a in [0, 255].
    """
    if len(color) == 3:
        r, g, b = color
        return (int(r), int(g), int(b), 255)
    r, g, b, alpha = color
    alpha = max(0.0, min(1.0, float(alpha)))
    return (int(r), int(g), int(b), int(round(alpha * 255)))

class PygameSurface:
    """
    The drawing boundary used by the contour renderer: clear, set the stroke, draw a line.
    Wraps a pygame.Surface, usually the display surface.

    Strokes go through pygame.gfxdraw, which blends each primitive with what is
    already on the surface, so overlapping translucent lines build up brightness.
    """
    def __init__(self, screen):
        self.screen = screen
        self.stroke_color = to_rgba(C.COLOR_WHITE)
        self.stroke_width = C.CONTOUR_LINE_WIDTH
        self.line_cap = C.CONTOUR_LINE_CAP

    @property
    def width(self):
        return self.screen.get_width()

    @property
    def height(self):
        return self.screen.get_height()

    def clear(self, color):
        self.screen.fill(tuple(color[:3]))

    def set_stroke(self, color, width, cap=C.CONTOUR_LINE_CAP):
        self.stroke_color = to_rgba(color)
        self.stroke_width = max(1, int(round(width)))
        self.line_cap = cap

    def draw_line(self, start, end):
        x1, y1 = int(round(start[0])), int(round(start[1]))
        x2, y2 = int(round(end[0])), int(round(end[1]))
        if self.stroke_width == 1:
            pygame.gfxdraw.line(self.screen, x1, y1, x2, y2, self.stroke_color)
            return

        half = self.stroke_width / 2
        length = math.hypot(end[0] - start[0], end[1] - start[1])
        if length > 0:
            # Offset both endpoints along the normal to get the outline of the thick line.
            nx = -(end[1] - start[1]) / length * half
            ny = (end[0] - start[0]) / length * half
            outline = [
                (round(start[0] + nx), round(start[1] + ny)),
                (round(end[0] + nx), round(end[1] + ny)),
                (round(end[0] - nx), round(end[1] - ny)),
                (round(start[0] - nx), round(start[1] - ny)),
            ]
            pygame.gfxdraw.filled_polygon(self.screen, outline, self.stroke_color)
        if self.line_cap == "round":
            radius = int(round(half))
            pygame.gfxdraw.filled_circle(self.screen, x1, y1, radius, self.stroke_color)
            pygame.gfxdraw.filled_circle(self.screen, x2, y2, radius, self.stroke_color)
