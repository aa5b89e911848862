# freud

freud is a small image analyst. You give it an image file and a command,
and it prints facts about the image: its size, particular pixels, the
brightest and darkest pixels, and the extremes of each colour component.
Images are read with Pillow.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

Every run needs at least one image passed with `-f` / `--file` and a
command chosen with `-c` / `--command`. Remaining positional arguments are
passed to the command. Only the first file is used by the commands.

```
freud -f images/input/image.jpeg -c dimension
freud -f images/input/image.jpeg -c first_pixel
freud -f images/input/image.jpeg -c print_pixel 10 20
freud -f images/input/image.jpeg -c max_component R
freud -f images/input/image.jpeg -c stat_report
```

Available commands:

| Command         | Arguments   | Output                                                  |
|-----------------|-------------|---------------------------------------------------------|
| `helloworld`    |             | `Hello World !` (no trailing newline)                   |
| `dimension`     |             | `Dimension : W, H`                                      |
| `first_pixel`   |             | the first three bytes of the image data                 |
| `tenth_pixel`   |             | the three bytes at offset 27                            |
| `second_line`   |             | the three bytes at offset 3 × width                     |
| `print_pixel`   | `X Y`       | RGB of the pixel at (X, Y)                              |
| `max_pixel`     |             | position and RGB of the first pixel with the largest sum  |
| `min_pixel`     |             | position and RGB of the first pixel with the smallest sum |
| `max_component` | `R`/`G`/`B` | position and value of the largest component             |
| `min_component` | `R`/`G`/`B` | position and value of the smallest component            |
| `stat_report`   |             | runs the statistics above and writes them to `stat.txt` |

Notes on commands:

- `helloworld`, `dimension` and `first_pixel` also run when the command
  merely starts with that name; the others need the exact name.
- `first_pixel`, `tenth_pixel` and `second_line` read raw bytes and assume
  three bytes per pixel, whatever the image's channel count.
- `print_pixel` does nothing unless two positional arguments are given; they
  are read as leading integers (non-numeric text counts as 0). Coordinates
  outside the image are reported as an error.
- For greyscale images a pixel's R, G and B all hold the grey value.

Other options:

- `--debug` prints the parsed files, arguments and command before running.
- `--brief` turns debug output off again.
- `-v` / `--version` prints `Version 1.0.0` and exits.
- `--type` takes a value and is ignored.

Long options may be abbreviated when unambiguous. Unknown options are
reported on standard error and skipped. At most 10 files and 5 positional
arguments are accepted, and the command name is cut to 25 characters.

If no file is given, freud prints `Missing file` and exits with status 1.
An unreadable image, a missing component argument or out-of-range
coordinates also end the run with status 1.

## Library use

```python
from freud.image import read_image
from freud.features import Component, max_component, max_pixel, stat_report

image = read_image("images/input/image.jpeg")
print(image.width, image.height, image.channels)
print(image.get_pixel(0, 0))          # Pixel(r=..., g=..., b=...)

for x, y, pixel in image.pixels():    # row by row from the top left
    ...

x, y, pixel = max_pixel("images/input/image.jpeg")
brightest_red = max_component("images/input/image.jpeg", Component.R)
report = stat_report("images/input/image.jpeg", "stat.txt")
```

The feature functions print their result as the command line does and also
return it. `read_image` raises `freud.image.ImageReadError` when a file
cannot be read; `Image.get_pixel` raises `IndexError` outside the image.

Command-line arguments can also be handled from Python:
`freud.config.parse_arguments` returns a `Config`, `Config.check_file`
raises `MissingFileError` when no file was given, `Config.debug_report`
returns the debug text, and `freud.cli.run_command` runs the matching
commands and returns their names.

## What freud does not do

freud only reads and reports on images. It does not edit, transform or
save images, and the only file it writes is the `stat_report` text file.