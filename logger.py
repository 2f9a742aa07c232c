# logger.py

# This will hold a reference to the animation's TimeManager instance.
_time_manager = None

def set_time_manager(tm):
    """Sets the global time manager for the logger to use."""
    global _time_manager
    _time_manager = tm

def log(message):
    """Prints a message with a frame/time stamp if available."""
    # Check if the time manager has been set and the animation has started.
    if _time_manager and _time_manager.frame_count > 0:
        time_str = f"[Frame {_time_manager.frame_count:06d} t={_time_manager.time:.6f}]"
        print(f"{time_str} {message}")
    else:
        # For messages logged before the first frame is rendered.
        print(f"[Anim Start] {message}")
