"""Unit tests for raster export geometry helpers."""

import pytest
from PIL import Image

from vitae.resume.raster import LinkBox, calculate_fit_size, flatten, link_rect


@pytest.mark.unit
def test_calculate_fit_size_width_bound():
    """Tall-enough images are scaled to the page width."""
    width, height = calculate_fit_size(1600, 2000, 595, 842)

    assert width == pytest.approx(595)
    assert height == pytest.approx(2000 * 595 / 1600)


@pytest.mark.unit
def test_calculate_fit_size_height_bound():
    """Very long images are scaled down to one page height."""
    width, height = calculate_fit_size(1600, 4000, 595, 842)

    assert height == pytest.approx(842)
    assert width == pytest.approx(1600 * 842 / 4000)


@pytest.mark.unit
def test_link_rect_scales_and_flips():
    """Boxes are scaled per axis and flipped into bottom-left PDF space."""
    box = LinkBox("https://x.com", x=100, y=50, width=200, height=20)

    rect = link_rect(box, fx=0.5, fy=0.25, page_height=842)

    assert rect == pytest.approx((50, 842 - 12.5 - 5, 150, 842 - 12.5))


@pytest.mark.unit
@pytest.mark.parametrize("width,height", [(4, 100), (100, 4), (3, 3)])
def test_link_rect_discards_degenerate(width, height):
    """Regions 2 units or smaller in either direction are dropped."""
    box = LinkBox("https://x.com", x=0, y=0, width=width, height=height)
    assert link_rect(box, fx=0.5, fy=0.5, page_height=842) is None


@pytest.mark.unit
def test_flatten_transparent_image():
    """Transparent pixels end up on the white background."""
    image = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    flat = flatten(image)

    assert flat.mode == "RGB"
    assert flat.getpixel((0, 0)) == (255, 255, 255)


@pytest.mark.unit
def test_flatten_keeps_rgb():
    image = Image.new("RGB", (4, 4), (10, 20, 30))
    assert flatten(image) is image
