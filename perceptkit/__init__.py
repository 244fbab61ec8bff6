"""Target localisation, config message records, engine logging and depth-camera constants."""

__version__ = "0.1.0"

__all__ = [
    "camera_constants",
    "detection",
    "messages",
    "trtlog",
]