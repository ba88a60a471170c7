"""Basic rasterkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rasterkit import (
    GradientOrientation,
    Path,
    PixelBuffer,
    Point,
    RawFont,
    draw_radial_gradient,
    fill_gradient,
    hex_to_rgba,
    resize,
    save,
    write,
)
from rasterkit.logging_config import setup_logging


def demonstrate_gradients() -> PixelBuffer:
    # Vertical backdrop, then a red glow fading out towards the corners.
    card = PixelBuffer.new(400, 240)
    fill_gradient(card, hex_to_rgba("#1d2b53"), hex_to_rgba("#7e2553"), GradientOrientation.VERTICAL)
    draw_radial_gradient(card, Point(200, 120), (255, 0, 77, 255), (255, 0, 77, 0))
    return card


def demonstrate_shapes(card: PixelBuffer) -> None:
    # Translucent triangle pasted over the glow.
    Path(400, 240).move_to(20, 220).line_to(200, 20).line_to(380, 220).draw(card, (255, 236, 39, 96))


def demonstrate_text(card: PixelBuffer) -> None:
    font = RawFont.default()
    face, width = font.fit_text("rasterkit", 64, 360)
    write(card, "rasterkit", hex_to_rgba("#fff1e8"), face, (card.width - width) // 2, 90)


if __name__ == "__main__":
    setup_logging("DEBUG")
    card = demonstrate_gradients()
    demonstrate_shapes(card)
    demonstrate_text(card)
    save(card, "card.png")
    save(resize(card, 200, 200), "card_small.png")
    print("wrote card.png and card_small.png")
