"""Execution of pre-test and post-test shell hooks."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

PLACEHOLDER_OPEN = "__OPEN__"
PLACEHOLDER_CLOSE = "__CLOSE__"

RunCommand = Callable[..., bytes]
RenderTemplate = Callable[["TemplateContext", Any, str], str]


def create_placeholder(expression: str) -> str:
    """Wrap a template expression in the placeholder markers."""
    return f"{PLACEHOLDER_OPEN}{expression}{PLACEHOLDER_CLOSE}"


def restore_template_vars(text: str) -> str:
    """Turn placeholder markers back into template delimiters."""
    return text.replace(PLACEHOLDER_OPEN, "{{").replace(PLACEHOLDER_CLOSE, "}}")


def run_shell_command(name: str, *args: str, cwd: Any = None) -> bytes:
    """Run a command and return its combined stdout and stderr.

    Raises subprocess.CalledProcessError (carrying the output) on a non-zero exit.
    """
    argv = [name, *args]
    proc = subprocess.run(
        argv,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
    )
    if proc.returncode != 0:
        raise subprocess.CalledProcessError(proc.returncode, argv, output=proc.stdout)
    return proc.stdout


@dataclass(frozen=True)
class Hook:
    """A shell command run before or after a test."""

    run: str
    name: str = ""


@dataclass
class HookResult:
    """The outcome of running one hook."""

    name: str
    command: str
    output: bytes | None = None
    error: BaseException | None = None


@dataclass
class TemplateContext:
    """Values available to hook templates."""

    repositories: Mapping[str, str] | None
    inputs: Any
    outputs: Any
    tests: Mapping[str, Any] | None


class HookError(Exception):
    """A hook failed to render or to run.

    ``result`` is the result of the failing hook; ``results`` holds every hook
    result gathered up to and including the failure.
    """

    def __init__(self, message: str, result: HookResult) -> None:
        super().__init__(message)
        self.result = result
        self.results: list[HookResult] = [result]


def _as_text(output: bytes | str | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def build_hook_failure_message(
    hook_type: str,
    hook_name: str,
    command_with_template_vars: str,
    exit_code: int,
    output: bytes | str | None,
) -> str:
    """Describe a failed hook: exit code, indented output, and name or command."""
    output_str = _as_text(output).strip().replace("\n", "\n    ")

    if hook_name:
        msg = f"{hook_type} hook '{hook_name}' failed with exit code {exit_code}"
        return f"{msg}: {output_str}" if output_str else msg

    msg = f"{hook_type} hook failed with exit code {exit_code}"
    return f"{msg}: {output_str or command_with_template_vars}"


def _debug(message: str) -> None:
    print(message, file=sys.stderr)


class HookExecutor:
    """Runs hooks through a shell, rendering template variables first."""

    def __init__(
        self,
        repositories: Mapping[str, str] | None,
        debug: bool,
        run_command: RunCommand | None,
        render_template: Callable[[str, TemplateContext, str], str],
    ) -> None:
        self.repositories = repositories
        self.debug = debug
        self.run_command = run_command if run_command is not None else run_shell_command
        self.render_template = render_template

    def process_template_variables(
        self, hook: Hook, inputs: Any, outputs: Any, tests: Mapping[str, Any] | None
    ) -> tuple[str, str]:
        """Return ``(final_command, command_with_template_vars)`` for a hook."""
        if PLACEHOLDER_OPEN not in hook.run:
            return hook.run, hook.run

        with_vars = restore_template_vars(hook.run)
        context = TemplateContext(self.repositories, inputs, outputs, tests)
        final = self.render_template(with_vars, context, "hook")
        return final, with_vars

    def execute_hook(
        self,
        hook: Hook,
        hook_type: str,
        inputs: Any,
        outputs: Any,
        tests: Mapping[str, Any] | None,
    ) -> HookResult:
        """Run one hook and return its result; raise HookError on failure."""
        try:
            final, with_vars = self.process_template_variables(hook, inputs, outputs, tests)
        except Exception as exc:
            template_error = RuntimeError(f"failed to render hook template: {exc}")
            template_error.__cause__ = exc
            command = hook.run
            if PLACEHOLDER_OPEN in hook.run:
                command = restore_template_vars(hook.run)
            result = HookResult(hook.name, command, None, template_error)
            if hook.name:
                message = (
                    f"{hook_type} hook '{hook.name}' failed to render template: "
                    f"{hook.run}: {exc}"
                )
            else:
                message = f"{hook_type} hook failed to render template: {hook.run}: {exc}"
            raise HookError(message, result) from exc

        if self.debug:
            if hook.name:
                _debug(f"Executing {hook_type} hook '{hook.name}': {final}")
            else:
                _debug(f"Executing {hook_type} hook '{final}'")

        try:
            output = self.run_command("sh", "-c", final)
        except Exception as exc:
            output = getattr(exc, "output", None)
            result = HookResult(hook.name, with_vars, output, exc)
            exit_code = exc.returncode if isinstance(exc, subprocess.CalledProcessError) else 1
            message = build_hook_failure_message(
                hook_type, hook.name, with_vars, exit_code, output
            )
            raise HookError(message, result) from exc

        return HookResult(hook.name, with_vars, output, None)

    def execute_hooks(
        self,
        hooks: Iterable[Hook],
        hook_type: str,
        inputs: Any,
        outputs: Any,
        tests: Mapping[str, Any] | None,
    ) -> list[HookResult]:
        """Run hooks in order, stopping at the first failure.

        The raised HookError carries every result gathered so far.
        """
        results: list[HookResult] = []
        for hook in hooks:
            try:
                results.append(self.execute_hook(hook, hook_type, inputs, outputs, tests))
            except HookError as err:
                err.results = [*results, err.result]
                raise
        return results