import tkinter as tk
from tkinter import colorchooser

import numpy as np
from PIL import Image, ImageTk

from .surfaces import to_hex


def to_photoimage_from_rgba(rgba):
    """Convert an RGBA numpy array to a Tk PhotoImage.

    Note: Builds a fresh PIL Image every call so the PhotoImage always
    reflects the current array contents.
    """
    img = Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8))
    return ImageTk.PhotoImage(img)


def pick_color(parent, swatch, current, on_pick, title):
    """Ask for a color seeded with `current`; on a choice call `on_pick` and
    recolor `swatch`. A cancelled dialog changes nothing. Returns the color or None."""
    rgb, _hex = colorchooser.askcolor(color=to_hex(current), title=title, parent=parent)
    if rgb is None:
        return None
    color = tuple(int(round(c)) for c in rgb)
    on_pick(color)
    swatch.config(bg=to_hex(color))
    return color


def make_color_button(parent, label_text, get_color, on_pick, title=None):
    """Create a toolbar button with a color swatch that opens a color chooser.

    get_color: returns the current (r, g, b), used to seed the dialog.
    on_pick: called with the chosen (r, g, b); not called when cancelled.
    Returns the button frame.
    """
    row = tk.Frame(parent)
    swatch = tk.Label(row, width=2, relief='solid', borderwidth=1, bg=to_hex(get_color()))
    command = lambda: pick_color(parent, swatch, get_color(), on_pick, title or label_text)
    tk.Button(row, text=label_text, command=command).pack(side='left')
    swatch.pack(side='left', padx=(4, 0), fill='y')
    return row
