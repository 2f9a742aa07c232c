#main.py

import pygame
import cProfile
import pstats
import constants as C
from topography import TopographicView
from surface import PygameSurface
from frame_stats import FrameStatsManager
from ui import draw_status_overlay
import logger

def initialize_display():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating resizable display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(C.WINDOW_CAPTION)
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def run_animation(stats):
    screen, font = initialize_display()
    clock = pygame.time.Clock()
    view = TopographicView(screen.get_width(), screen.get_height())
    view.stats = stats
    logger.set_time_manager(view.time_manager)
    surface = PygameSurface(screen)
    show_status = C.UI_SHOW_STATUS_DEFAULT

    logger.log("Starting main animation loop...")
    logger.log("CONTROLS: [SPACE] to Pause, [H] to toggle the status line, [ESC] to Quit.")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.VIDEORESIZE:
                # pygame 2 resizes the display surface itself; the view only needs the new size.
                view.resize(event.w, event.h)
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE: running = False
                if event.key == pygame.K_SPACE: view.time_manager.toggle_pause()
                if event.key == pygame.K_h: show_status = not show_status
        if not running:
            break

        # The display surface object can be replaced on resize.
        surface.screen = pygame.display.get_surface()
        segment_count = view.render_frame(surface)
        if show_status:
            draw_status_overlay(surface.screen, font, view.time_manager, segment_count)

        pygame.display.flip()
        clock.tick(C.CLOCK_TICK_RATE)

    logger.log("Main animation loop ended.")

def shutdown_animation():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Animation ended cleanly.")

def main():
    logger.log("--- Animation Start ---")
    stats = FrameStatsManager()
    try:
        run_animation(stats)
    finally:
        shutdown_animation()
    stats.show_graphs()
    logger.log("--- Animation Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the animation to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
