# mockshell

`mockshell` provides the parts of a small shell that works on a mock
file system. These parts are image files, visitors that inspect or display
files, shell commands, and an interactive prompt that sends each input line
to the command it names. Input and output streams can be passed in
everywhere, so the shell can be driven from a script or a test as easily as
from a terminal.

## Modules

- `mockshell.errors` holds the exceptions. All of them derive from
  `MockShellError`:
  - `FileDoesNotExistError`
  - `InvalidImageError`
  - `CannotAppendImageError`
  - `InvalidUsageError`
  - `CommandFailedError`
  - `CommandInsertError`
  - `FileNotAddedError`
- `mockshell.files` holds `AbstractFile`, the interface for stored files,
  and `ImageFile`, which implements it.
  - `AbstractFile` has the properties `name` and `size`, and the methods
    `read`, `write`, `append`, `accept(visitor)` and `clone(copy_name)`.
  - An `ImageFile` is a square image whose pixels are `X` or space.
  - The bytes given to `write` are the pixels row by row, followed by one
    digit for the side length. Bad data raises `InvalidImageError`.
  - `dimension` is the side length of the image.
  - `append` always raises `CannotAppendImageError`.
  - `clone("name")` returns a copy called `name.img`.
- `mockshell.visitors` holds the visitors:
  - `AggregateStatisticsVisitor` counts files and bytes. It keeps them in
    `image_count`, `text_count`, `image_bytes` and `text_bytes`. An image
    counts as `dimension * dimension + 1` bytes.
  - `BasicDisplayVisitor(out)` draws images as a grid. Row 0 is the bottom
    row, so the grid is printed from the top row down. It prints text as it
    is.
  - `MetadataDisplayVisitor(out)` prints a file's name, size and type.
- `mockshell.commands` holds the commands. Each one runs with
  `execute(argument_string)`, prints its usage with `display_info()`, and
  raises a `MockShellError` when it fails.

  | Class                   | Usage                                       |
  |-------------------------|---------------------------------------------|
  | `LSCommand`             | `ls`, or `ls -m` for type and size          |
  | `DisplayCommand`        | `ds <filename> [-d]` (`-d`: raw data)       |
  | `CatCommand`            | `cat <filename> [-a]`                       |
  | `CopyCommand`           | `cp <file_to_copy> <new_name_no_extension>` |
  | `AggregateStatsCommand` | `as`                                        |
  | `MacroCommand`          | runs its steps from one input string        |

  - `CatCommand` reads lines from its input until `:wq`, which saves, or
    `:q`, which discards. Without `-a` the lines replace the file's
    contents. With `-a` it first shows the contents, then appends the lines.
  - `MacroCommand(file_system, parse_strategy)` takes steps added with
    `add_command`. Its `parse_strategy.parse(text)` must return one
    argument for each step.
- `mockshell.prompt` holds `CommandPrompt`.
  - `add_command(name, command)` registers a command. It raises
    `CommandInsertError` if the name is already taken.
  - `run()` loops until it reads `q` or reaches the end of input. `help`
    lists the commands, and `help <name>` shows a command's usage.
  - Any other line runs the command named by its first word, with the rest
    of the line as the argument. A failure prints `Command failed`, and an
    unknown name prints `Command does not exist`.

## Supplying a file system

Commands work with any object that has these four methods:

- `file_names()`
- `open_file(name)`, which returns a file or `None`
- `close_file(file)`
- `add_file(name, file)`, which raises a `MockShellError` on failure

```python
import io
import sys

from mockshell.commands import CopyCommand, DisplayCommand, LSCommand
from mockshell.errors import FileNotAddedError
from mockshell.files import ImageFile
from mockshell.prompt import CommandPrompt


class MemoryFileSystem:
    def __init__(self):
        self.files = {}

    def file_names(self):
        return self.files.keys()

    def open_file(self, name):
        return self.files.get(name)

    def close_file(self, file):
        pass

    def add_file(self, name, file):
        if name in self.files:
            raise FileNotAddedError(name)
        self.files[name] = file


fs = MemoryFileSystem()
image = ImageFile("cross.img")
image.write(b"X X X X X" + b"3")  # a 3x3 image
fs.add_file(image.name, image)

shell = CommandPrompt(fs, stdin=io.StringIO("cp cross.img twin\nls -m\nds twin.img\nq\n"))
shell.add_command("ls", LSCommand(fs))
shell.add_command("cp", CopyCommand(fs))
shell.add_command("ds", DisplayCommand(fs))
shell.run()
```

## What the package does not provide

- There is no text file class.
- There is no concrete file system and no file factory. `CommandPrompt`
  only stores the `file_system` and `file_factory` it is given.
- There is no parsing strategy for `MacroCommand`.
- There is no command-line program. To get a working shell, build a
  `CommandPrompt` in your own code as shown above.