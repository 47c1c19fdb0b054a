"""Printed page count estimate for a rendered resume."""

import math

PAGE_WIDTH_MM = 210
PAGE_HEIGHT_MM = 297


def estimate_pages(width: float, height: float) -> int:
    """Estimate A4 pages for an element ``width`` x ``height`` pixels wide.

    The element is taken to span the full 210mm page width. The result is
    advisory: the raster export always produces a single page.
    """
    if width <= 0:
        return 1
    px_per_mm = width / PAGE_WIDTH_MM
    page_height_px = PAGE_HEIGHT_MM * px_per_mm
    return max(1, math.ceil(height / page_height_px))
