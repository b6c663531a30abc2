from .image import image_to_raster, raster_to_image

__all__ = ["image_to_raster", "raster_to_image"]
