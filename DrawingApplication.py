"""
Entry point for the drawing application. The drawing session lives in the
`drawing_app` package; this module only wires it to Tk widgets.
"""
import logging
import os
import tkinter as tk
from tkinter import filedialog, messagebox

from drawing_app import CIRCLE, LINE, RECTANGLE, CanvasCompositor, ImageError, TkCanvasSurface
from drawing_app.log_config import configure_logging
from drawing_app.pointer_handler import PointerHandler
from drawing_app.settings import APP_GEOMETRY, APP_TITLE, CANVAS_BG, IMAGE_FILETYPES
from drawing_app.ui_helpers import make_color_button

logger = logging.getLogger('drawing_app.app')


class DrawingApplication(tk.Tk):
    def __init__(self, compositor=None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry(APP_GEOMETRY)
        try:
            # Bring window to front briefly so it isn't hidden behind others
            self.after(100, self.lift)
            self.after(120, lambda: self.attributes('-topmost', True))
            self.after(700, lambda: self.attributes('-topmost', False))
        except tk.TclError:
            pass

        self.compositor = compositor or CanvasCompositor()

        # toolbar along the top
        toolbar = tk.Frame(self, bd=1, relief='raised')
        toolbar.pack(side='top', fill='x')
        make_color_button(toolbar, 'Primary Color', lambda: self.compositor.primary_color,
                          self._on_primary_color, title='Choose Primary Color').pack(side='left', padx=2, pady=2)
        make_color_button(toolbar, 'Secondary Color', lambda: self.compositor.secondary_color,
                          self._on_secondary_color, title='Choose Secondary Color').pack(side='left', padx=2, pady=2)
        tk.Button(toolbar, text='Load Image', command=self.load_image_dialog).pack(side='left', padx=2, pady=2)

        self.kind_var = tk.StringVar(value=self.compositor.selected_kind)
        for kind in (CIRCLE, RECTANGLE, LINE):
            tk.Radiobutton(toolbar, text=kind, value=kind, variable=self.kind_var, indicatoron=False,
                           command=self._on_kind_change).pack(side='left', padx=2, pady=2)

        # status bar at bottom
        self.statusbar = tk.Label(self, text='Ready', anchor='w')
        self.statusbar.pack(fill='x', side='bottom')

        self.canvas = tk.Canvas(self, bg=CANVAS_BG, highlightthickness=0)
        self.canvas.pack(fill='both', expand=True)
        self.surface = TkCanvasSurface(self.canvas)
        self.pointer = PointerHandler(self.canvas, self._on_pointer)

    # ---- toolbar callbacks ----
    def _on_primary_color(self, color):
        self.compositor.set_primary_color(color)
        self.set_status(f'Primary color {color}')

    def _on_secondary_color(self, color):
        self.compositor.set_secondary_color(color)
        self.set_status(f'Secondary color {color}')

    def _on_kind_change(self):
        kind = self.kind_var.get()
        self.compositor.set_selected_kind(kind)
        self.set_status(f'Drawing {kind}')

    def load_image_dialog(self):
        path = filedialog.askopenfilename(title='Load Image', filetypes=IMAGE_FILETYPES, parent=self)
        if not path:
            return
        self.load_image(path)

    def load_image(self, path):
        try:
            image = self.compositor.load_image(path)
        except ImageError as e:
            self.set_status(f'Failed to load {os.path.basename(path)}')
            messagebox.showerror('Load Image', str(e), parent=self)
            return
        h, w = image.shape[:2]
        self.set_status(f'Loaded {os.path.basename(path)} ({w}×{h})')
        self.redraw()

    # ---- pointer + painting ----
    def _on_pointer(self, event):
        if self.compositor.handle_pointer(event):
            self.redraw()

    def redraw(self):
        self.compositor.render(self.surface)

    def set_status(self, txt):
        self.statusbar.config(text=txt)


def main():
    configure_logging()
    app = DrawingApplication()
    logger.info('Drawing application started')
    app.mainloop()


if __name__ == '__main__':
    main()
