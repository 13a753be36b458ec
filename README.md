# nobuild

Write the build of your C programs as ordinary Python code instead of in a
separate build language. A build is a series of commands. You put each one
together, run it, and stop at the first failure.

## Installing

```console
pip install .
```

To run the tests, install the `test` extra and then run `pytest`:

```console
pip install .[test]
pytest
```

## Commands

`nobuild.command.Cmd` holds a list of arguments. You build it up, run it, and
reset it so the same object can be used again:

```python
from nobuild.command import Cmd

cmd = Cmd()
cmd.append("cc", "-Wall", "-Wextra", "-o", "main", "main.c")
print(cmd.render())        # cc -Wall -Wextra -o main main.c
cmd.run_sync_and_reset()

cmd.append("./main", "foo", "bar")
cmd.run_sync_and_reset()
```

- `append(*args)` adds arguments. `extend(other)` adds the arguments of
  another `Cmd` or of any iterable of strings. `reset()` empties the command.
- `render()` returns the command as one line. An argument that contains a
  space is put in single quotes.
- `run_async(redirect=None)` logs the rendered command, starts it and returns
  the `subprocess.Popen` object. `run_sync(redirect=None)` also waits for it.
- `run_async_and_reset` and `run_sync_and_reset` empty the command afterwards
  and close the streams of the `Redirect` they were given, whether the run
  succeeded or not.

Running an empty command, or a program that cannot be started, raises
`CommandError`. A process that exits with a non-zero status or is killed by a
signal raises `ProcessError` (from `nobuild.process`; `CommandError` is a
subclass of it).

## Processes and redirection

`nobuild.process` provides:

- `Redirect(fdin=None, fdout=None, fderr=None)`: replacement standard streams
  for a child process. Each may be an open binary file or a file descriptor;
  `None` keeps the parent's stream. `close()` closes what it holds, and it
  can be used as a context manager.
- `fd_open_for_read(path)` opens a file for reading.
  `fd_open_for_write(path)` creates or truncates a file with mode `rw-r--r--`.
  Both raise `FileSystemError` when they fail.
- `proc_wait(proc)` waits for a process and raises `ProcessError` unless it
  exited with status 0.
- `Procs` collects processes that run at the same time. `wait()` waits for
  all of them and raises afterwards if any failed. `wait_and_reset()` also
  empties the batch. `append_with_flush(proc, n)` adds a process and drains
  the batch once it holds `n` processes.

```python
from nobuild.command import Cmd
from nobuild.process import Redirect, fd_open_for_read, fd_open_for_write

cmd = Cmd()
cmd.append("cat")
cmd.run_sync_and_reset(Redirect(fdin=fd_open_for_read("input.txt"),
                                fdout=fd_open_for_write("output.txt")))
```

## Compiler helpers

`nobuild.cchelpers` fills in the usual compiler arguments. On POSIX systems
they are `cc`, `-Wall -Wextra` and `-o <path>`. On Windows they are `cl.exe`,
no extra flags, and `/Fe:<path>`.

```python
from nobuild.command import Cmd
from nobuild.cchelpers import cc, cc_flags, cc_output, cc_inputs

cmd = Cmd()
cc(cmd)
cc_flags(cmd)
cc_output(cmd, "main")
cc_inputs(cmd, "main.c")
cmd.run_sync_and_reset()
```

`nobuild.compiler` gives an interface based on symbolic flags:

- `detect(environ=None)` reads `CC` from the given mapping, or from the
  process environment if none is given. It returns `GCC` for `gcc`, `CLANG`
  for `clang`, and `CC` for `cc` or when `CC` is unset. For any other name it
  returns a `Compiler` that has that name and knows no flags.
- `Compiler.lookup_flag(name)` turns a symbolic name into the compiler's
  argument. The known names are `debug`, `werror`, `wall`, `wextra`,
  `syntax-only`, and `std=c89`, `std=c99`, `std=c11`, `std=c17` and
  `std=c23`.
- `CompilerCommand(compiler=None)` starts with the compiler's name. It
  provides:
  - `std("c17")` adds the flag for the standard. An unknown standard is
    skipped with a warning, and the method returns `False`.
  - `flags(*names)` adds the flags for the given names. Unknown names are
    skipped with a warning.
  - `output(path)` adds the compiler's output arguments. Only `cc` has any:
    `-o <path>`.
  - `inputs(*files)` adds the files to compile.
  - `run()` runs the compiler and returns its exit status. A failure is also
    logged. It raises `CommandError` if the compiler cannot be started.

## Files and paths

`nobuild.files` provides these functions:

- `mkdir_if_not_exists(path)` returns `True` if it created the directory and
  `False` if the directory already existed.
- `copy_file`
- `copy_directory_recursively`
- `read_entire_dir` returns a list of entry names.
- `read_entire_file` returns bytes.
- `write_entire_file` accepts bytes or str.
- `get_file_type` returns a `FileType`.
- `delete_file` deletes a file or an empty directory.
- `rename` replaces the target if it exists.

They raise `FileSystemError`, a subclass of `OSError`, when they fail.

`nobuild.paths` provides these functions:

- `needs_rebuild(output, inputs)` is true when the output is missing or when
  any input is newer than it. Times are compared to the whole second. A
  missing input is an error. `needs_rebuild1(output, input)` does the same
  for a single input.
- `file_exists(path)` returns `False` if the path does not exist. It raises
  if the check itself fails.
- `path_name(path)` returns the last part of a path.
- `get_current_dir()` and `set_current_dir(path)` read and change the
  working directory.

## Rebuilding a build program

`nobuild.rebuild.go_rebuild_urself(argv, source_path, *more_sources)` is
meant for a compiled build program whose path is `argv[0]`. If the program
is missing or older than any of its sources, it does the following:

1. Moves the program aside to `<program>.old`.
2. Compiles it again with `rebuild_command(binary, source)`, which is
   `cc -o <binary> <source>`, or `cl.exe /Fe:<binary> <source>` on Windows.
3. Deletes the old copy.
4. Runs the new program with the remaining arguments.
5. Exits with status 0, or with status 1 on any failure. If the compile
   fails, the old program is restored.

When nothing is stale, it simply returns.

## Logging

Messages go to standard error with the prefix `[INFO]`, `[WARNING]` or
`[ERROR]`. `nobuild.logs.set_minimal_log_level(LogLevel.WARNING)` hides
informational messages, and `LogLevel.NO_LOGS` hides all of them.
`minimal_log_level()` returns the current threshold, and
`log(level, message)` writes a message.

## Command-line programs

`nobuild` builds three programs in the current directory with
`-std=c17 -pedantic -g -Wall -Wextra -Werror`, using the compiler named by
`CC`, or `cc` if `CC` is not set:

- `sample` from `sample.c`
- `cc-test` from `cc.c` and `cc-test.c`
- `xlib` from `xlib.c` with `-lX11`, on Linux only

With the argument `test`, it then runs `./sample` and `./cc-test`. It exits
with status 1 at the first failure.

```console
nobuild
nobuild test
```

`nobuild-cc-demo` uses `CompilerCommand` to compile `sample.c` into `sample`
with `-std=c17 -g -Werror -Wall -Wextra`. A failing compiler is reported on
standard error, but the exit status stays 0. The command exits with status 1
only if the compiler cannot be started. On systems other than POSIX it only
prints a warning.

```console
nobuild-cc-demo
```

## What it does not do

The package does not ship any C sources. Both commands expect the files
listed above to be present in the current directory. Compiler support covers
only the flags and compilers named above. There is no dependency tracking
beyond comparing modification times.