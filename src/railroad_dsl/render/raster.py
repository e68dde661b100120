"""
PNG output for rendered diagrams.

Rasterization is delegated to ``cairosvg``, an optional dependency
installed with the ``png`` extra.
"""

from __future__ import annotations

import logging

from railroad_dsl.core.errors import RailroadDslError

logger = logging.getLogger(__name__)


def fit_size(
    width: int,
    height: int,
    max_width: int | None = None,
    max_height: int | None = None,
) -> tuple[int, int]:
    """
    Scale (width, height) down to fit the given bounds, keeping aspect ratio.

    Diagrams already inside the bounds keep their natural size.
    """
    scale = 1.0
    if max_width is not None and width > max_width:
        scale = min(scale, max_width / width)
    if max_height is not None and height > max_height:
        scale = min(scale, max_height / height)
    return max(1, round(width * scale)), max(1, round(height * scale))


def svg_to_png(
    svg: str,
    width: int,
    height: int,
    max_width: int | None = None,
    max_height: int | None = None,
    background: str | None = None,
) -> bytes:
    """Rasterize standalone SVG markup into PNG bytes.

    Args:
        svg: Standalone SVG document.
        width: Natural width of the diagram in pixels.
        height: Natural height of the diagram in pixels.
        max_width: Optional upper bound for the output width.
        max_height: Optional upper bound for the output height.
        background: Optional canvas colour behind the diagram.

    Raises:
        RailroadDslError: If cairosvg or its native library is unavailable.
    """
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        # OSError: cairosvg is installed but the native cairo library is not.
        raise RailroadDslError(
            f"PNG output requires cairosvg and the cairo library ({e}); "
            "install with: pip install railroad-dsl[png]"
        ) from e

    out_width, out_height = fit_size(width, height, max_width, max_height)
    logger.debug("Rasterizing %dx%d diagram at %dx%d", width, height, out_width, out_height)
    return cairosvg.svg2png(
        bytestring=svg.encode("utf-8"),
        output_width=out_width,
        output_height=out_height,
        background_color=background,
    )
