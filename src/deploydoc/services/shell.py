"""Shell command runner for deploydoc steps."""

import subprocess
from pathlib import Path

# File descriptor step output goes to when stdout is reserved for results
STDERR_FILENO = 2


class ShellError(Exception):
    """Error launching a shell command."""

    pass


def run_shell(
    command: str,
    *,
    shell: str = "sh",
    cwd: Path | None = None,
    output_to_stderr: bool = False,
) -> int:
    """Run command text through a shell and return its exit status.

    Output is not captured; the command writes straight to the terminal.
    No timeout is applied.

    Args:
        command: Shell text to run (passed to ``shell -c``)
        shell: Shell executable
        cwd: Working directory (default: current directory)
        output_to_stderr: Send the command's stdout to stderr, keeping
            this process's stdout free for machine-readable output

    Returns:
        Exit status of the command

    Raises:
        ShellError: If the shell cannot be started
    """
    stdout = STDERR_FILENO if output_to_stderr else None
    try:
        result = subprocess.run([shell, "-c", command], cwd=cwd, stdout=stdout)
    except FileNotFoundError:
        raise ShellError(f"Shell not found: {shell}") from None
    except OSError as e:
        raise ShellError(f"Could not start {shell}: {e}") from e
    return result.returncode
