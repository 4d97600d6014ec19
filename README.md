# termpaint

Draw in the terminal with the mouse. Pick a symbol and a colour, draw dots,
horizontal and vertical lines, rectangles, circles and flood fills, and save
the picture as a text file that keeps its colours as terminal escape codes.

The editor runs on POSIX terminals that report mouse motion (it switches the
terminal to raw mode and uses SGR mouse reporting).

## Installation

```
pip install .
```

## Usage

```
termpaint
```

Options:

```
termpaint --help       show the key and mouse bindings
termpaint --version    print the output of `git describe --tags`
```

On start, the directory named by `image_save_directory` is created if it
does not exist.

### Keys

| Key               | Action                                   |
|-------------------|------------------------------------------|
| Esc, Ctrl+C       | Exit                                     |
| Tab, F2           | Toggle the symbol and colour menu        |
| Ctrl+O, F3        | Toggle the file menu                     |
| Ctrl+H, F1        | Toggle the help menu                     |
| F4                | Toggle the shape menu                    |
| F6, Ctrl+K        | Toggle the settings view                 |
| Ctrl+F            | Switch between the fill brush and a dot  |
| Ctrl+S            | Open the save prompt                     |
| Enter             | Confirm the save prompt                  |
| Backspace         | Delete the last typed character          |
| Delete            | Delete the file last hovered in the file menu (by its name) |
| Any character     | Use it as the symbol (or type it into the save prompt) |

### Mouse

| Button      | Action                                                   |
|-------------|----------------------------------------------------------|
| Left        | Draw with the current brush, or pick from an open menu   |
| Right       | Erase a cell                                             |
| Middle      | Clear the drawing                                        |
| Wheel       | Change the shape size, or a colour channel in the menu   |
| Ctrl+Wheel  | Change the rectangle height                              |

In the symbol and colour menu, click a symbol to use it. Hover over a colour
channel and type digits to set its value (capped at 255), scroll to change it
by one, or click to switch it between 0 and 255.

### Saving

Ctrl+S opens a prompt for a file name. After Enter the picture is written to
`<name>.txt` (relative to the current directory); with no name typed, it is
written into `image_save_directory` under a name taken from the current date
and time. The outermost column on each side is left out of every line.

## Configuration

Settings are read from `termPaint/config.yaml` in the user configuration
directory (for example `~/.config/termPaint/config.yaml`). With the
environment variable `ENV=dev`, `config.yaml` in the current directory is
used instead. If the settings cannot be read, a file is created in the user
configuration directory: a copy of `config.yaml` from the current directory
when there is one, otherwise the built-in defaults.

The settings cover the background colour, the default symbol and colour, the
pointer symbol and colour, the symbols offered in the menu, whether folders
and hidden folders appear in the file menu, where pictures are saved, how
long notifications stay on screen and which notifications are shown.

## What it does not do

- Pictures are not loaded back: the file menu lists directories and `.txt`,
  `.jpg` and `.png` files and lets you move between directories, but
  clicking a file only closes the menu.
- The continuous-line brushes and their menu exist, but no key opens that
  menu.
- Settings are shown read-only; they are changed by editing the YAML file.