"""Evenly distributed points on a unit sphere and coordinate conversions.

Based on the golden-angle spiral described by RedBlobGames:
https://www.redblobgames.com/x/1842-delaunay-voronoi-sphere/
"""

__version__ = "0.1.0"
