# mandelscope

An interactive explorer for the Mandelbrot set. By default it opens a
full-screen 1920x1080 window that shows the set. You can drag the view around
and zoom in and out. The number of iterations per pixel grows with the zoom
level, so detail stays sharp as you go deeper.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Running

```
mandelscope
```

Options:

| Option            | Meaning                                         |
|-------------------|-------------------------------------------------|
| `--width N`       | Window width in pixels (default 1920)           |
| `--height N`      | Window height in pixels (default 1080)          |
| `--windowed`      | Do not switch to fullscreen                     |
| `--frames N`      | Stop after N frames                             |

For example, a small window:

```
mandelscope --windowed --width 800 --height 450
```

## Controls

| Input                          | Action                                   |
|--------------------------------|------------------------------------------|
| Left mouse button + drag       | Pan the view                             |
| Right mouse button             | Zoom in around the cursor                |
| Shift + right mouse button     | Zoom out around the cursor               |
| Mouse wheel                    | Zoom in (up) or out (down)               |
| `R`                            | Reset the view                           |
| `F1` / `F2` / `F3`             | Switch plotting implementation           |
| `Esc` or closing the window    | Quit                                     |

Zoom stays between x0.25 and x100000000000. The overlay in the top-left corner
shows the frame rate, the active implementation, the current zoom and the
effort (iterations per pixel).

## Plotting implementations

All three implementations are vectorised with numpy. They differ in how pixels
are grouped and how the result is rounded:

- `Impl.SCALAR` (`plot_scalar`): each pixel on its own; the alpha is
  `round(255 * (steps - 1) / effort)`.
- `Impl.SSE4` (`plot_sse4`): pixels in groups of two that share the row of the
  group's first pixel; the alpha is `rint(255 * iterations / effort)`.
- `Impl.AVX2` (`plot_avx2`): the same with groups of four.

## Using it as a library

The geometry and the plotting code in `mandelscope.plane` and
`mandelscope.mandelbrot` can be used without a window:

```python
from mandelscope.plane import Plane, Vec2i, Vec2d
from mandelscope.mandelbrot import Surface, Impl, plotter_for, zoom_effort

plane = Plane(screen=Vec2i(320, 180), offset=Vec2d(2.5, -1.0), scale=320 / 3.5, zoom=1.0)
surface = Surface(320, 180)
plot = plotter_for(Impl.SCALAR)
plot(plane, surface, zoom_effort(plane.zoom))
```

`Surface.data` is a white `(height, width, 4)` RGBA `uint8` array; after the
call its alpha channel (also available flat as `Surface.alpha`) holds the
escape iteration count of each pixel, scaled to 0–255. `Surface.set_alpha`
sets one pixel's alpha by flat index and raises on out-of-range values. The
plotters raise `ValueError` for an effort below 1.

`zoom_effort(z)` gives the iteration budget for a zoom level, and
`zoom_speed(z)` a zoom speed that grows with the zoom exponent.

`Plane.from_screen` and `Plane.to_screen` convert between screen pixels and
points in the complex plane; `Plane.from_screen_no_offset` converts a screen
distance to a plane distance. `Plane.zoom_around` changes the zoom and keeps
the point under the given pixel in place.

The window loop lives in `mandelscope.app`, whose `handle_input`,
`update_plane` and `render` functions make up one frame.

## Limitations

Plotting runs in a single process; there is no multi-threaded rendering, and
the overlay does not show a thread count. There is no way to save an image or
a view position.