import logging
import os

from PySide6.QtGui import QImage

from ..board import Sign

logger = logging.getLogger(__name__)

MARKER_FILES = {Sign.X: "x.png", Sign.O: "o.png"}


def load_markers(asset_dir):
    """
    load the X and O marker images
    returns {Sign: QImage}; missing or unreadable files are left out
    and the board falls back to drawn marks
    """
    markers = {}
    for sign, name in MARKER_FILES.items():
        path = os.path.join(asset_dir, name)
        if not os.path.isfile(path):
            logger.warning("marker image %s not found, drawing %s instead", path, sign.value)
            continue
        image = QImage(path)
        if image.isNull():
            logger.warning("could not decode marker image %s", path)
            continue
        markers[sign] = image
    return markers
