"""Line-at-a-time reading of bytes from file descriptors through a fixed-size buffer."""

__version__ = "0.1.0"
__all__ = ["stash", "reader", "multi"]