"""Tkinter window host for the Life engine.

Keys: ``S`` steps one generation while paused, ``Space`` toggles pause and
``R`` reseeds the grid.
"""

import sys
import tkinter as tk
from typing import Dict, Optional, Tuple

import numpy as np

from ..core.engine import DEFAULT_SCALE, FrameInput, LifeEngine

# Keysym to intent; letters are bound in both cases
KEY_BINDINGS = {
    "s": "step",
    "S": "step",
    "space": "toggle_pause",
    "r": "reseed",
    "R": "reseed",
}

ALIVE_COLOR = "#FFFFFF"
BACKGROUND_COLOR = "#000000"


class TkinterLifeGUI:
    """Tkinter window that drives a :class:`LifeEngine` once per frame."""

    def __init__(self, master: tk.Tk, engine: LifeEngine, scale: int = DEFAULT_SCALE, frame_delay: int = 16) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            engine: Engine to drive and draw
            scale: Pixels per cell
            frame_delay: Milliseconds between frames
        """
        self.master = master
        self.master.title("Conway's Game of Life")
        self.master.configure(bg="#333333")

        self.engine = engine
        self.cell_size = scale
        self.frame_delay = frame_delay
        self.canvas_width = engine.width * scale
        self.canvas_height = engine.height * scale

        # Intents seen since the last frame
        self._pending: Dict[str, bool] = {"toggle_pause": False, "step": False, "reseed": False}

        # Canvas objects cache, keyed by cell
        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self._drawn = np.zeros((engine.width, engine.height), dtype=np.bool_)
        self._last_frame: Optional[int] = None
        self._after_id: Optional[str] = None

        self.setup_ui()
        self.redraw_all_cells()
        self.update_status()

    def setup_ui(self) -> None:
        """Create the canvas, status line and key bindings."""
        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg=BACKGROUND_COLOR,
            highlightthickness=0,
        )
        self.canvas.pack()

        self.status_label = tk.Label(
            self.master,
            text="",
            bg="#333333",
            fg="white",
            font=("Arial", 9),
            anchor="w",
        )
        self.status_label.pack(fill=tk.X)

        for keysym, intent in KEY_BINDINGS.items():
            self.master.bind(f"<KeyPress-{keysym}>", lambda event, intent=intent: self.press(intent))

    def press(self, intent: str) -> None:
        """Record an intent to hand to the engine on the next frame."""
        self._pending[intent] = True

    def collect_input(self) -> FrameInput:
        """Turn the intents pressed since the last frame into one FrameInput."""
        frame_input = FrameInput(**self._pending)
        for intent in self._pending:
            self._pending[intent] = False
        return frame_input

    def run_frame(self, elapsed: float) -> int:
        """Drive the engine for one frame and redraw.

        Args:
            elapsed: Seconds since the previous frame

        Returns:
            Number of generations the engine advanced
        """
        frame_input = self.collect_input()
        advanced = self.engine.update(elapsed, frame_input)

        if frame_input.reseed:
            self.redraw_all_cells()
        elif advanced:
            self.draw_changed_cells()

        self.update_status()
        return advanced

    def update_loop(self) -> None:
        """Frame loop, rescheduled with ``after``."""
        current_time = int(self.master.tk.call("clock", "milliseconds"))
        elapsed = 0.0 if self._last_frame is None else (current_time - self._last_frame) / 1000.0
        self._last_frame = current_time

        self.run_frame(elapsed)
        self._after_id = self.master.after(self.frame_delay, self.update_loop)

    def stop(self) -> None:
        """Cancel the scheduled frame."""
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None

    def draw_cell(self, x: int, y: int, alive: bool) -> None:
        """Draw or remove a single cell on the canvas."""
        cell_key = (x, y)
        if alive:
            if cell_key not in self.cell_objects:
                x1 = x * self.cell_size
                y1 = y * self.cell_size
                self.cell_objects[cell_key] = self.canvas.create_rectangle(
                    x1, y1, x1 + self.cell_size, y1 + self.cell_size, fill=ALIVE_COLOR, outline=""
                )
        elif cell_key in self.cell_objects:
            self.canvas.delete(self.cell_objects.pop(cell_key))

    def redraw_all_cells(self) -> None:
        """Redraw every cell from the current grid."""
        self.canvas.delete("all")
        self.cell_objects.clear()

        cells = self.engine.current_grid()
        for x, y in self.engine.grid.iter_alive():
            self.draw_cell(x, y, True)
        self._drawn[:] = cells

    def draw_changed_cells(self) -> None:
        """Draw only the cells that differ from the last drawn frame."""
        cells = self.engine.current_grid()
        for x, y in zip(*np.nonzero(cells != self._drawn)):
            self.draw_cell(int(x), int(y), bool(cells[x, y]))
        self._drawn[:] = cells

    def update_status(self) -> None:
        """Refresh the status line."""
        state = "Paused" if self.engine.paused else "Running"
        self.status_label.config(
            text=f"{state} | Generation {self.engine.generation} | Population {self.engine.population}"
        )


def main(engine: Optional[LifeEngine] = None, scale: int = DEFAULT_SCALE, test_mode: Optional[bool] = None) -> None:
    """Open a window and run the engine until it is closed.

    Args:
        engine: Engine to drive; a default-sized random engine if omitted
        scale: Pixels per cell
        test_mode: Close the window after three seconds (defaults to ``--test`` in argv)
    """
    if engine is None:
        engine = LifeEngine()
    if test_mode is None:
        test_mode = "--test" in sys.argv

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterLifeGUI(root, engine, scale=scale)

    if test_mode:
        print("Running in test mode...")

        def auto_exit() -> None:
            print(f"Test completed. Ran {engine.generation} generations.")
            app.stop()
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    app.update_loop()
    root.mainloop()


if __name__ == "__main__":
    main()
