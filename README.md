# fractalview

An interactive viewer for the Mandelbrot set and two Newton fractals.
Each pixel of an 800 x 800 window is drawn one by one.

## Installation

```
pip install .
```

## Usage

Start the viewer with the Mandelbrot set:

```
fractalview
```

An optional argument selects the fractal:

| Argument | Fractal                                   |
|----------|-------------------------------------------|
| `0`      | Mandelbrot set (default)                  |
| `1`      | Newton fractal of `z^3 - 1`               |
| `2`      | Newton fractal of `z^8 + 15 z^4 - 16`     |

```
fractalview 1
```

If the argument does not start with a number, the viewer prints
`Invalid number: ...` and shows the Mandelbrot set. If a number is
followed by other characters, it prints `Trailing characters after
number: ...` and uses the number. A number other than 0, 1 or 2 stops the
viewer with `Unknown fractal: ...` and exit status 1. The viewer also
exits with status 1 when the display cannot be started.

### Controls

- **Left click**: zoom in by a factor of four. The new view is centred on
  the point under the cursor and redrawn.
- **m**: double the Mandelbrot iteration count, which starts at 100. The
  view is re-centred on the last clicked pixel and redrawn. Before the
  first click, that pixel is the top-left corner.
- **f**: switch between fullscreen and a window. The cursor is hidden in
  fullscreen.
- **q** or closing the window: quit.

## Library use

The computations work without a window:

```python
from fractalview.fractal import mandelbrot_escape, newton_root_index
from fractalview.viewport import Viewport, pixel_value, render_pixels
from fractalview.color import pixel_color

mandelbrot_escape(complex(0.5, 0.5), 100, 30)   # escape step, 0 if bounded
newton_root_index(complex(2, 0), 0, 30)         # 1-based root index, 0 if none

view = Viewport(width=80, height=80)            # centred on 0, zoom 0.5
for i, j, hue, valuehue in render_pixels(view, 0, 100):
    rgb = pixel_color(hue, valuehue)
```

- `fractalview.fractal` holds the iteration kernels `mandelbrot_escape`,
  `newton_cubic`, `newton_octic` and `newton_root_index`, and the `ROOTS`
  of both Newton polynomials.
- `fractalview.viewport.Viewport` maps pixels to points of the plane with
  `point`. It is moved with `reset`, `recenter` and `zoom_in`. Note that
  `zoom_in` only takes effect on the next `recenter` or `reset`.
- `render_pixels` yields `(i, j, hue, valuehue)` row by row. Both edges
  are included, so it covers `width + 1` by `height + 1` pixels.
- `fractalview.color` converts between HSV and RGB with `rgb_to_hsv` and
  `hsv_to_rgb`. `pixel_color` gives the 8-bit colour for a pixel, and
  black when `valuehue` is 0.
- `fractalview.window.RenderWindow` is a pygame window with an off-screen
  canvas. It can be used as a context manager.

## Limitations

The viewer only draws to the screen. It cannot save images, zoom out or
pan, and it has no settings beyond the fractal argument.

## Running the tests

```
pip install .[test]
pytest
```