from __future__ import annotations
import numpy as np
import cv2
from PIL import Image

# mean gray level below which the display is treated as light digits on a dark panel
DARK_BACKGROUND_MEAN = 110

def preprocess_for_ocr(
    img: Image.Image,
    max_width: int = 1600,
    min_width: int = 640,
    do_threshold: bool = False,
) -> Image.Image:
    gray = cv2.cvtColor(np.array(img.convert("RGB")), cv2.COLOR_RGB2GRAY)

    # Meter crops are often tiny, bill photos often huge
    h, w = gray.shape[:2]
    if w < min_width:
        scale = min_width / float(w)
        gray = cv2.resize(gray, (int(w * scale), int(h * scale)), interpolation=cv2.INTER_CUBIC)
    elif w > max_width:
        scale = max_width / float(w)
        gray = cv2.resize(gray, (int(w * scale), int(h * scale)), interpolation=cv2.INTER_AREA)

    gray = cv2.bilateralFilter(gray, d=7, sigmaColor=50, sigmaSpace=50)

    # Tesseract wants dark text on a light background (LCD/LED displays are the reverse)
    if float(gray.mean()) < DARK_BACKGROUND_MEAN:
        gray = cv2.bitwise_not(gray)

    if do_threshold:
        _, gray = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)

    return Image.fromarray(gray)
