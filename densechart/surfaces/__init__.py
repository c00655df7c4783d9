from densechart.surfaces.base import DrawingSurface
from densechart.surfaces.raster import RasterSurface
from densechart.surfaces.svg import SvgSurface

__all__ = ["DrawingSurface", "RasterSurface", "SvgSurface"]
