#time_manager.py

import constants as C

class TimeManager:
    """Owns the animation time accumulator. Time advances by a fixed step per frame, not wall-clock."""
    def __init__(self, speed=C.ANIMATION_SPEED):
        if speed < 0:
            raise ValueError(f"speed must be non-negative, got {speed}")
        self.speed = speed
        self.time = 0.0
        self.frame_count = 0
        self.is_paused = False

    def advance(self):
        """Moves time forward by one frame step. Returns the new time value."""
        if self.is_paused:
            return self.time
        self.time += self.speed
        self.frame_count += 1
        return self.time

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        print(f"Event: Animation {'paused' if self.is_paused else 'resumed'}.")

    def get_display_string(self):
        time_str = f"Frame: {self.frame_count}, t = {self.time:.4f}"
        speed_str = f"Step: {self.speed}"
        if self.is_paused:
            speed_str = "Step: PAUSED"

        return f"{time_str} | {speed_str}"
