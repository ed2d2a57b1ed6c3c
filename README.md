# xprin

Two building blocks for a test runner:

- `xprin.hooks` runs shell hooks before and after a test.
- `xprin.inputs` copies a test's input files into a working directory.

The package uses only the standard library.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Hooks

A `Hook` has a `run` command and an optional `name`. Each hook runs through
`sh -c`.

### Template placeholders

A command may contain template placeholders. `create_placeholder(".Repositories.myrepo")`
returns `__OPEN__.Repositories.myrepo__CLOSE__`. `restore_template_vars`
converts the markers back to `{{.Repositories.myrepo}}`.

If a command contains a placeholder, the executor first restores the template
delimiters. It then calls your `render_template(content, context, template_name)`
with these arguments:

- a `TemplateContext` that holds `repositories`, `inputs`, `outputs` and `tests`;
- the template name `"hook"`.

If a command has no placeholders, it runs unchanged and `render_template` is
not called.

### Example

```python
from xprin.hooks import (
    Hook,
    HookError,
    HookExecutor,
    create_placeholder,
    run_shell_command,
)


def render(content, context, template_name):
    # Stand-in renderer: only understands .Repositories.<name>
    for name, path in (context.repositories or {}).items():
        content = content.replace("{{.Repositories.%s}}" % name, path)
    return content


executor = HookExecutor(
    repositories={"myrepo": "/path/to/myrepo"},
    debug=False,
    run_command=lambda name, *args: run_shell_command(name, *args, cwd="."),
    render_template=render,
)

hooks = [
    Hook(name="greet", run="echo hello"),
    Hook(name="where", run="echo " + create_placeholder(".Repositories.myrepo")),
]
try:
    results = executor.execute_hooks(hooks, "pre-test", None, None, {})
except HookError as err:
    print(err)
    results = err.results
```

If you pass `None` as `run_command`, the executor uses `run_shell_command`
in the current directory. `run_shell_command` returns stdout and stderr
combined, as bytes. On a non-zero exit it raises
`subprocess.CalledProcessError`, and the error carries the output.

With `debug=True`, the executor writes each command it is about to run to
standard error.

### Results and failures

`execute_hooks` runs the hooks in order and returns a list of `HookResult`
objects. Each result has these fields: `name`, `command` (the command with
`{{ ... }}` template variables), `output` and `error`.

Execution stops at the first failure, and a `HookError` is raised:

- `err.result` is the result of the hook that failed.
- `err.results` holds every result up to and including the failed one.

A template that fails to render gives a message of the form
`<type> hook '<name>' failed to render template: <command>: <reason>`.

A command that fails gives a message with the exit code. The exit code is 1
unless the error was a `CalledProcessError`. The message takes one of these
forms:

- `<type> hook '<name>' failed with exit code <n>: <output>`
- `<type> hook failed with exit code <n>: <output or command>`

Lines of output after the first are indented by four spaces.
`build_hook_failure_message` builds this message on its own.

`execute_hook` and `process_template_variables` run a single hook, or prepare
its command, without running the others.

## Staging inputs

`InputCopier(inputs_dir, debug=False)` copies files and directories into a
working directory. The `debug` flag makes it report each copy on standard
error.

`copy_input(src, input_type)` creates `<inputs_dir>/<input_type>/`, copies
`src` into it, and returns the new path. Use `copy_to_path(src, dest)` to
copy to a destination you choose, for example to keep apart two inputs that
have the same file name. Both methods create parent directories as needed.
A failure raises `OSError` with a message that says which step failed.

```python
from xprin.inputs import InputCopier, unique_base_names_for_paths

copier = InputCopier("/tmp/work/inputs")
copier.copy_input("examples/xr.yaml", "xr")  # -> /tmp/work/inputs/xr/xr.yaml

unique_base_names_for_paths(["/aws/xrd.yaml", "/gcp/xrd.yaml"])
# ['xrd.yaml', 'xrd_1.yaml']
```

`unique_base_names_for_paths` keeps the order and the length of its input.
Each repeated base name gets a `_1`, `_2`, ... suffix before the extension.
Passing `None` returns `None`.

## What this package does not do

- It has no command-line program.
- It does not read test-suite files and does not run tests.
- It has no template engine of its own. You supply the renderer.
- It does not convert or patch resource manifests.