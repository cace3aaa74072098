"""2D interactive renderer using matplotlib."""

from collections import deque
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import EllipseCollection
from matplotlib.figure import Figure

from gravity_sandbox.interaction.signals import (
    ToggleRun, Reset, PointerDown, PointerHeld, PointerUp, SaveRequest, LoadRequest, Signal,
)
from gravity_sandbox.render.base import DrawRecord, Renderer

TOGGLE_KEY = ' '
RESET_KEY = 'r'
SAVE_KEY = 's'
LOAD_KEY = 'l'


class Renderer2D(Renderer):
    """Real-time renderer drawing bodies as filled circles in simulation units.

    Circles are sized in data units, so the drawn radius is exactly the radius
    used for hit-testing. Keyboard and mouse events are buffered and handed
    out by poll_signals() once per tick.
    """

    def __init__(
        self,
        figsize: Tuple[float, float] = (10, 10),
        dpi: int = 100,
        trail_length: int = 40,
        view_extent: float = 500.0,
        fullscreen: bool = False,
        ask_save_path: Optional[Callable[[], Optional[str]]] = None,
        ask_load_path: Optional[Callable[[], Optional[str]]] = None
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            trail_length: Number of previous frames kept as fading trails (0 disables)
            view_extent: Half-width of the initial view in simulation units
            fullscreen: Open the window full-screen
            ask_save_path: Called on the save key; returns a path or None
            ask_load_path: Called on the load key; returns a path or None
        """
        self.figsize = figsize
        self.dpi = dpi
        self.trail_length = trail_length
        self.view_extent = view_extent
        self.fullscreen = fullscreen
        self.ask_save_path = ask_save_path
        self.ask_load_path = ask_load_path

        self.fig: Optional[Figure] = None
        self.ax = None
        self.circles: Optional[EllipseCollection] = None
        self._diameters = np.zeros(0)
        self.trail_scatter = None
        self.trails = deque(maxlen=max(trail_length, 1))
        self.initialized = False

        self._held_keys = set()
        self._pointer_down = False
        self._pending: List[Signal] = []

    def _initialize(self):
        """Create the figure and connect input events if not already done."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        if self.fullscreen and self.fig.canvas.manager is not None:
            self.fig.canvas.manager.full_screen_toggle()
        self.fig.patch.set_facecolor('black')
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()
        self.ax.set_xlim(-self.view_extent, self.view_extent)
        self.ax.set_ylim(-self.view_extent, self.view_extent)

        # Keep our own keys away from matplotlib's default shortcuts
        for key in (SAVE_KEY, LOAD_KEY, RESET_KEY):
            for param, bindings in plt.rcParams.items():
                if param.startswith('keymap.') and key in bindings:
                    bindings.remove(key)

        canvas = self.fig.canvas
        canvas.mpl_connect('key_press_event', self._on_key_press)
        canvas.mpl_connect('key_release_event', self._on_key_release)
        canvas.mpl_connect('button_press_event', self._on_button_press)
        canvas.mpl_connect('motion_notify_event', self._on_motion)
        canvas.mpl_connect('button_release_event', self._on_button_release)

        self.initialized = True

    def _on_key_press(self, event):
        if event.key is None:
            return
        key = event.key.lower()
        # Auto-repeat delivers presses while held; only the first one counts
        first_press = key not in self._held_keys
        self._held_keys.add(key)
        if not first_press:
            return
        if key == RESET_KEY:
            self._pending.append(Reset())
        elif key == SAVE_KEY and self.ask_save_path is not None:
            self._pending.append(SaveRequest(self.ask_save_path()))
            # The modal dialog swallows the release event
            self._held_keys.discard(key)
        elif key == LOAD_KEY and self.ask_load_path is not None:
            self._pending.append(LoadRequest(self.ask_load_path()))
            self._held_keys.discard(key)

    def _on_key_release(self, event):
        if event.key is not None:
            self._held_keys.discard(event.key.lower())

    def _on_button_press(self, event):
        if event.button != 1 or event.inaxes is not self.ax:
            return
        self._pointer_down = True
        self._pending.append(PointerDown((event.xdata, event.ydata)))

    def _on_motion(self, event):
        if not self._pointer_down or event.inaxes is not self.ax:
            return
        self._pending.append(PointerHeld((event.xdata, event.ydata)))

    def _on_button_release(self, event):
        if event.button != 1 or not self._pointer_down:
            return
        self._pointer_down = False
        self._pending.append(PointerUp())

    def poll_signals(self) -> List[Signal]:
        """Signals gathered since the last poll, plus held-key state."""
        signals = self._pending
        self._pending = []
        if TOGGLE_KEY in self._held_keys:
            # Reported every tick while held; the controller fires only on the edge
            signals.insert(0, ToggleRun())
        return signals

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    def render(self, records: Sequence[DrawRecord]):
        """Render current frame."""
        if self.initialized and not self._is_figure_open():
            return
        self._initialize()

        if records:
            offsets = np.array([record.position for record in records], dtype=np.float64)
            diameters = np.array([2.0 * record.radius for record in records], dtype=np.float64)
            colors = np.array([record.color for record in records], dtype=np.float64)
        else:
            offsets = np.zeros((0, 2))
            diameters = np.zeros(0)
            colors = np.zeros((0, 3))

        if self.trail_length > 0:
            self._draw_trails(offsets, colors)

        # Fast path: only move the existing circles when the sizes are unchanged
        if self.circles is not None and np.array_equal(diameters, self._diameters):
            self.circles.set_offsets(offsets)
            self.circles.set_facecolors(colors)
        else:
            if self.circles is not None:
                self.circles.remove()
            self.circles = EllipseCollection(
                diameters, diameters, np.zeros(len(diameters)),
                units='xy', offsets=offsets,
                offset_transform=self.ax.transData,
                facecolors=colors, edgecolors='none', zorder=2,
            )
            self.ax.add_collection(self.circles)
            self._diameters = diameters

        self.fig.canvas.draw_idle()

    def _draw_trails(self, offsets: np.ndarray, colors: np.ndarray):
        """Fading dots at previous positions, oldest faintest."""
        self.trails.append((offsets.copy(), colors.copy()))
        frames = list(self.trails)[:-1]
        if self.trail_scatter is not None:
            self.trail_scatter.remove()
            self.trail_scatter = None
        if not frames:
            return

        points, rgba = [], []
        for age, (frame_offsets, frame_colors) in enumerate(frames):
            alpha = 0.05 + 0.45 * (age + 1) / len(frames)
            points.append(frame_offsets)
            rgba.append(np.column_stack([frame_colors, np.full(len(frame_colors), alpha)]))
        points = np.concatenate(points)
        if len(points) == 0:
            return
        self.trail_scatter = self.ax.scatter(
            points[:, 0], points[:, 1], s=2.0, c=np.concatenate(rgba),
            edgecolors='none', zorder=1,
        )

    def reset_trails(self):
        self.trails.clear()

    def set_title(self, text: str):
        if self.fig is not None and self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(text)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.circles = None
            self.trail_scatter = None
            self.initialized = False
            self._diameters = np.zeros(0)
