"""Application defaults. Edit here; there are no config files or flags."""

import os

APP_TITLE = 'Drawing Application'
APP_GEOMETRY = '800x600'
CANVAS_BG = 'white'

# Reference colors for drawing and two-tone quantization
DEFAULT_PRIMARY = (0, 0, 0)
DEFAULT_SECONDARY = (255, 255, 255)
DEFAULT_KIND = 'Circle'

IMAGE_FILETYPES = [
    ('Images', '*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff'),
    ('PNG', '*.png'),
    ('JPEG', '*.jpg *.jpeg'),
    ('Bitmap', '*.bmp'),
    ('All files', '*.*'),
]

# per-user, so an installed (read-only) package never writes next to itself
LOG_DIR = os.path.join(os.path.expanduser('~'), '.drawing_app', 'logs')
LOG_FILE = 'drawing_app.log'
