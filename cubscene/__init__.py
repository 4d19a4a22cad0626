"""Scene files, XPM textures, pixel images and named colours for a small raycaster."""

__version__ = "0.1.0"
__all__ = ["colors", "visual", "textscan", "image", "xpm", "scene"]