# ferrocore

Core building blocks for a text editor, each usable on its own.

## Modules

- `ferrocore.keycode` – key codes and modifier flags. `KeyCode` pairs a
  `KeyKind` with a value where that kind needs one. `KeyCode.char`,
  `KeyCode.function`, `KeyCode.media` and `KeyCode.modifier` build keys
  that carry a value, and `KeyCode.lowercased` lowers an ASCII character
  key. `str()` gives forms such as `F5`, `a`, `PageUp` or
  `Media(PlayPause)`. `KeyModifiers` is a flag enum (`SHIFT`, `CONTROL`,
  `ALT`, `SUPER`, `HYPER`, `META`, `NONE`). Its `str()` lists the held
  modifiers, for example ` + Shift + Ctrl`, and is empty for `NONE`.
- `ferrocore.keymap` – key bindings and how a key press is resolved. A
  `Keymapping` binds a `Key` (a key code plus modifiers) to any command
  value. Its `Exclusiveness` controls how the modifiers are compared:
  `exclusive()` needs an exact match, `non_exclusive()` needs at least the
  mapping's modifiers, and `ignores(modifiers)` needs an exact match after
  the given modifiers are disregarded. `get_command_from_input` returns the
  command of the first mapping that matches, comparing character keys in
  ASCII lower case. If nothing matches, a character key gives a
  `CharCmd(ch)`, unless it is an ASCII letter or digit pressed with
  modifiers other than Shift alone. Otherwise it returns `None`.
- `ferrocore.indent` – `Indentation` is tabs or a number of spaces, with
  four spaces as the default. `Indentation.detect_indent(text)` guesses the
  style a text uses and falls back to the default. `width()` gives the
  width of one indentation unit, where a tab counts as 4.
  `to_next_indent(col)` gives the text that moves `col` to the next
  indentation stop. `from_width(width)` gives the whole indentation units
  that fit in `width` columns.
- `ferrocore.language` – `get_language_from_path(path)` returns a language
  name such as `"rust"`, `"cpp"` or `"dockerfile"`, judged by the file name
  alone, or `None`. `Pattern.suffix` patterns are compared case-sensitively.
  `Pattern.name` patterns match the whole file name and ignore case.
- `ferrocore.job_manager` – `JobManager.spawn_foreground_job(func, job_input)`
  runs `func(killed, progressor, job_input)` on a thread and returns a
  `JobHandle`.
  - The job reports intermediate values with `Progressor.make_progress`.
    `killed` is a `threading.Event` that is set by `JobHandle.kill()`.
  - `JobHandle.poll_progress()` returns pending `Progress` values first and
    then the final `End`. `JobHandle.try_recv()` returns the result.
  - Both raise `JobPending` while there is nothing to receive. An exception
    raised by the job is raised again when its result is received.
  - `poll_jobs()` joins threads that have finished. `close()`, or leaving a
    `with` block, waits for every job.
  - `EventLoopProxy` is a queue of events plus a render-request flag, and is
    shared between copies made with `dup()`. Each finished job requests a
    render through it.
  - `EventLoopControlFlow` describes what an event loop should do next:
    poll, wait, exit, or wait at most some seconds (`wait_max`).
- `ferrocore.branch` – `get_current_branch(cwd)` and `get_git_directory(cwd)`
  ask the `git` command. `BranchWatcher(proxy, cwd=None)` looks up the
  current branch in the background and again whenever the repository's
  `.git` directory changes, with a one-second debounce. It requests a
  render when it learns the branch name. `current_branch()` returns the
  name, or `None` until it is known. `force_reload()` looks it up again,
  and `close()` stops watching.

## Installation

    pip install ferrocore

`ferrocore.branch` needs the `git` executable on the `PATH`.

## Examples

Resolving a key press:

    from ferrocore.keycode import KeyCode, KeyModifiers
    from ferrocore.keymap import Key, Keymapping, Exclusiveness, get_command_from_input

    mappings = [
        Keymapping(Key(KeyCode.char("s"), KeyModifiers.CONTROL), "save", Exclusiveness.exclusive()),
    ]
    get_command_from_input(KeyCode.char("S"), KeyModifiers.CONTROL, mappings)  # "save"
    get_command_from_input(KeyCode.char("x"), KeyModifiers.NONE, mappings)     # CharCmd(ch='x')

Detecting indentation:

    from ferrocore.indent import Indentation

    indent = Indentation.detect_indent("fn main() {\n  let x = 1;\n}\n")
    indent.width()            # 2
    indent.to_next_indent(3)  # " "

Finding a file's language:

    from ferrocore.language import get_language_from_path

    get_language_from_path("src/main.rs")  # "rust"
    get_language_from_path("Dockerfile")   # "dockerfile"

Running a background job:

    from ferrocore.job_manager import JobManager, EventLoopProxy

    with JobManager(EventLoopProxy()) as jobs:
        handle = jobs.spawn_foreground_job(lambda killed, progress, n: n * 2, 21)
    handle.try_recv()  # 42

## What this package does not do

It is a set of building blocks, not an editor. It has no text buffers, no
screen or drawing, no command palette, no syntax highlighting, no
configuration files and no command to run. `get_language_from_path` only
names a language. Key bindings map keys to whatever command values you
supply, and the package ships no default set of bindings.

## Running the tests

    pip install "ferrocore[test]"
    pytest