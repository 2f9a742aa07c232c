#ui.py

import constants as C

def draw_status_overlay(screen, font, time_manager, segment_count):
    """Draws the frame/time line and the segment count in the top-left corner."""
    text = f"{time_manager.get_display_string()} | Segments: {segment_count}"
    text_surface = font.render(text, True, C.COLOR_STATUS_TEXT)
    screen.blit(text_surface, (C.UI_STATUS_POS_X, C.UI_STATUS_POS_Y))
