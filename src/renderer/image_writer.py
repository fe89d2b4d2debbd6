# renderer/image_writer.py
import os
import sys
import tempfile
from typing import TextIO

import numpy as np
from PIL import Image

PPM_MAGIC = "P3"
MAX_CHANNEL = 255

def write_ppm(pixels: np.ndarray, stream: TextIO):
    """
    Writes an ASCII full-color pixmap: magic, "<width> <height>", max value,
    then one "r g b" line per pixel, top row first, left to right.
    """
    height, width, _ = pixels.shape
    stream.write(f"{PPM_MAGIC}\n{width} {height}\n{MAX_CHANNEL}\n")
    for row in pixels:
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row.tolist()))

def write_png(pixels: np.ndarray, path: str):
    Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path, format="PNG")

def check_destination(path: str):
    """Raises FileNotFoundError if the file could not be created in its directory."""
    if path == "-":
        return
    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        raise FileNotFoundError(f"Output directory does not exist: {directory}")

def save_image(pixels: np.ndarray, path: str) -> str:
    """
    Saves quantized pixels. "-" writes PPM to stdout, a .png suffix writes PNG,
    anything else writes PPM. Files are written beside the target and renamed
    into place, so a failed write never leaves a truncated image.
    Returns a description of the destination.
    """
    if path == "-":
        write_ppm(pixels, sys.stdout)
        sys.stdout.flush()
        return "<stdout>"

    check_destination(path)
    fd, tmp_path = tempfile.mkstemp(prefix=".render-", suffix=".tmp",
                                    dir=os.path.dirname(path) or ".")
    try:
        if path.lower().endswith(".png"):
            os.close(fd)
            write_png(pixels, tmp_path)
        else:
            with os.fdopen(fd, "w", encoding="ascii", newline="\n") as f:
                write_ppm(pixels, f)
        # mkstemp creates owner-only files
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    return path
