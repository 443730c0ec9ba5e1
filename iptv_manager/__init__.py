"""Customer management for an IPTV resale business."""

__version__ = "1.0.0"
