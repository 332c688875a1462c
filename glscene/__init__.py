"""Geometry, frustum culling, hex grids, menus, containers and meshes for small 3D scenes."""

__version__ = "0.1.0"

__all__ = [
    "binarytree",
    "camera",
    "circularlist",
    "color",
    "frustum",
    "geometry",
    "hexgrid",
    "light",
    "menu",
    "mesh",
]