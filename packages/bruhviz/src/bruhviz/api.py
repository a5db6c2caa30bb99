from __future__ import annotations
from pathlib import Path
from PIL import Image

from bruhcodec.pixels import pixels_to_array, pixels_to_image

def to_image(width: int, height: int, pixels) -> Image.Image:
    return pixels_to_image(pixels, width, height)

def save_preview(width: int, height: int, pixels, out_png: str | Path) -> Path:
    out_png = Path(out_png)
    out_png.parent.mkdir(parents=True, exist_ok=True)
    to_image(width, height, pixels).save(out_png, format="PNG")
    return out_png

def show_preview(width: int, height: int, pixels, title: str = "Image preview") -> None:
    """Fenêtre matplotlib à la taille de l'image (1 pixel image = 1 pixel écran)."""
    import matplotlib.pyplot as plt
    arr = pixels_to_array(pixels, width, height)
    dpi = 100.0
    fig = plt.figure(figsize=(max(width, 1) / dpi, max(height, 1) / dpi), dpi=dpi)
    try:
        fig.canvas.manager.set_window_title(title)
    except AttributeError:
        pass  # backends sans fenêtre (Agg)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_axis_off()
    ax.imshow(arr, interpolation="nearest")
    plt.show()
