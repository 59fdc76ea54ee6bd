"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

HEADER_COLOR = "#0078D4"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Return the largest font for *text* that fits max_w × max_h."""
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            try:
                font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
            except OSError:
                return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            break
        font_size -= 1
    return font


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA calendar page: coloured header strip, day of month below."""
    size = 64
    header_h = 14
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, header_h - 1), fill=HEADER_COLOR)

    day = str((today or date.today()).day)
    body_h = size - header_h
    font = _fit_font(draw, day, size - 4, body_h - 4)

    # Centre the visible pixels inside the body (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), day, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header_h + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), day, fill="black", font=font)

    return img
