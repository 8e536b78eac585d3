"""
Command Executor Service.

Runs the external tools behind each check (formatter, test runner).
Handles timeouts, missing executables, output capturing, and logging.
"""

import asyncio
import contextlib
import os
import shlex
import signal
import time
from dataclasses import dataclass
from pathlib import Path

from commitgate.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

EXIT_CODE_NOT_FOUND = 127
EXIT_CODE_TIMEOUT = -1


@dataclass
class CommandResult:
    """Result of a command execution."""
    command: str
    exit_code: int
    stdout: str
    stderr: str
    duration: float
    is_timeout: bool = False
    not_found: bool = False

    @property
    def is_success(self) -> bool:
        """Check if command succeeded."""
        return self.exit_code == 0 and not self.is_timeout

    @property
    def output(self) -> str:
        """Combined stdout and stderr, the way a terminal would show them."""
        if self.stdout and self.stderr:
            return self.stdout.rstrip("\n") + "\n" + self.stderr
        return self.stdout or self.stderr


class CommandExecutor:
    """
    Command executor wrapper.
    """

    def __init__(self, default_timeout: float = 900.0):
        self.default_timeout = default_timeout

    async def run_async(
        self,
        command: str | list[str],
        cwd: str | Path | None = None,
        env: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> CommandResult:
        """
        Execute a command asynchronously.

        Args:
            command: Command string (split with shlex) or list of arguments
            cwd: Working directory
            env: Environment variables (merges with os.environ)
            timeout: Execution timeout in seconds

        Returns:
            CommandResult object. Missing executables and timeouts are
            reported through the result, not raised.
        """
        start_time = time.perf_counter()
        timeout_val = timeout if timeout is not None else self.default_timeout

        cmd_args = shlex.split(command) if isinstance(command, str) else list(command)
        cmd_str = shlex.join(cmd_args)

        run_env = os.environ.copy()
        if env:
            run_env.update(env)

        cwd_str = str(cwd) if cwd else "cwd"
        logger.debug("executing_command", command=cmd_str, cwd=cwd_str, timeout=timeout_val)

        if not cmd_args:
            return CommandResult(
                command=cmd_str,
                exit_code=EXIT_CODE_NOT_FOUND,
                stdout="",
                stderr="Empty command",
                duration=0.0,
                not_found=True,
            )

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd_args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(cwd) if cwd else None,
                env=run_env,
                start_new_session=True,  # Own process group so a timeout kills children too
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError) as e:
            logger.warning("command_not_found", command=cmd_str, error=str(e))
            return CommandResult(
                command=cmd_str,
                exit_code=EXIT_CODE_NOT_FOUND,
                stdout="",
                stderr=f"Command not found: {cmd_args[0]}",
                duration=time.perf_counter() - start_time,
                not_found=True,
            )

        try:
            stdout_data, stderr_data = await asyncio.wait_for(
                process.communicate(),
                timeout=timeout_val,
            )
        except asyncio.TimeoutError:
            logger.warning("command_timeout", command=cmd_str, timeout=timeout_val)
            self._kill(process)
            with contextlib.suppress(ProcessLookupError):
                await process.wait()

            return CommandResult(
                command=cmd_str,
                exit_code=EXIT_CODE_TIMEOUT,
                stdout="",
                stderr=f"Command timed out after {timeout_val:g}s",
                duration=time.perf_counter() - start_time,
                is_timeout=True,
            )

        duration = time.perf_counter() - start_time
        exit_code = process.returncode
        stdout_str = stdout_data.decode("utf-8", errors="replace")
        stderr_str = stderr_data.decode("utf-8", errors="replace")

        if exit_code != 0:
            logger.info(
                "command_failed",
                command=cmd_str,
                exit_code=exit_code,
                stderr_snippet=stderr_str[:200],
            )
        else:
            logger.debug("command_success", command=cmd_str, duration=duration)

        return CommandResult(
            command=cmd_str,
            exit_code=exit_code,
            stdout=stdout_str,
            stderr=stderr_str,
            duration=duration,
        )

    @staticmethod
    def _kill(process: asyncio.subprocess.Process) -> None:
        """Kill the process group, falling back to the single process."""
        if hasattr(os, "killpg"):
            with contextlib.suppress(ProcessLookupError, PermissionError):
                os.killpg(os.getpgid(process.pid), signal.SIGKILL)
                return
        with contextlib.suppress(ProcessLookupError):
            process.kill()
