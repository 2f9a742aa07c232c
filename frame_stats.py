# frame_stats.py

from collections import deque
import matplotlib.pyplot as plt
import logger as log
import constants as C

class FrameStatsManager:
    """
    Collects per-frame render statistics while the animation runs
    and plots them after the loop ends.

    Only the last `history` frames are kept for the plot; the summary
    totals cover every frame recorded.
    """
    def __init__(self, log_interval=C.STATS_LOG_INTERVAL_FRAMES, history=C.STATS_HISTORY_FRAMES):
        self.data = {
            'frame': deque(maxlen=history),
            'time': deque(maxlen=history),
            'segments': deque(maxlen=history),
            'render_ms': deque(maxlen=history),
        }
        self.log_interval = log_interval
        self.frame_count = 0
        self.segments_total = 0
        self.segments_max = 0
        self.render_ms_total = 0.0
        self.render_ms_max = 0.0
        log.log("FrameStatsManager initialized.")

    def add_frame(self, time_value, segment_count, render_ms):
        """
        Adds one rendered frame to all data series and the running totals.
        """
        self.data['frame'].append(self.frame_count)
        self.data['time'].append(time_value)
        self.data['segments'].append(segment_count)
        self.data['render_ms'].append(render_ms)

        self.frame_count += 1
        self.segments_total += segment_count
        self.segments_max = max(self.segments_max, segment_count)
        self.render_ms_total += render_ms
        self.render_ms_max = max(self.render_ms_max, render_ms)

        if self.log_interval and self.frame_count % self.log_interval == 0:
            recent = list(self.data['render_ms'])[-self.log_interval:]
            log.log(f"[FrameStats] {self.frame_count} frames, last {len(recent)} averaged {sum(recent) / len(recent):.1f} ms.")

    def has_data(self):
        """
        Checks if any frame has been recorded.
        """
        return self.frame_count > 0

    def summary(self):
        """
        Returns frame count and mean/max segment counts and render times over all recorded frames.
        """
        if not self.has_data():
            return {'frames': 0, 'mean_segments': 0.0, 'max_segments': 0, 'mean_render_ms': 0.0, 'max_render_ms': 0.0}
        return {
            'frames': self.frame_count,
            'mean_segments': self.segments_total / self.frame_count,
            'max_segments': self.segments_max,
            'mean_render_ms': self.render_ms_total / self.frame_count,
            'max_render_ms': self.render_ms_max,
        }

    def build_figure(self):
        """
        Uses matplotlib to build a two-axis line graph of segment count and render time per frame.
        """
        frames = list(self.data['frame'])
        log.log(f"[FrameStats] Generating frame plot with {len(frames)} data points...")

        fig, ax1 = plt.subplots(figsize=C.STATS_FIGURE_SIZE)
        ax1.set_title('Contour Segments and Render Time per Frame')
        ax1.set_xlabel('Frame')
        ax1.grid(True, which='both', linestyle='--', linewidth=0.5)

        # --- Segment count on the left axis ---
        ax1.set_ylabel('Segments drawn', color='tab:blue')
        line1, = ax1.plot(frames, list(self.data['segments']), color='tab:blue', label='Segments')
        ax1.tick_params(axis='y', labelcolor='tab:blue')

        # --- Render time on the right axis ---
        ax2 = ax1.twinx()
        ax2.set_ylabel('Render time (ms)', color='tab:orange')
        line2, = ax2.plot(frames, list(self.data['render_ms']), color='tab:orange', label='Render time (ms)')
        ax2.tick_params(axis='y', labelcolor='tab:orange')

        ax1.legend(handles=[line1, line2], loc='upper left')
        fig.tight_layout()
        return fig

    def show_graphs(self):
        """
        Displays the frame graph if data exists. Nothing is written to disk.
        """
        if not self.has_data():
            log.log("[FrameStats] No frames recorded, skipping plot generation.")
            return

        stats = self.summary()
        log.log(f"[FrameStats] {stats['frames']} frames, {stats['mean_segments']:.0f} segments/frame on average, "
                f"{stats['mean_render_ms']:.1f} ms mean render time ({stats['max_render_ms']:.1f} ms max).")
        self.build_figure()
        plt.show()
