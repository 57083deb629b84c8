"""Process launcher for the installed binary.

Backs the ``pm`` console script. Arguments are forwarded verbatim and the
child inherits stdin, stdout and stderr, so nothing here may write to those
streams except on failure.
"""

from __future__ import annotations

import signal
import subprocess
import sys
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, NoReturn, Optional, Sequence

from pmshim.bootstrap.paths import binary_path, get_pmshim_home
from pmshim.config import DEFAULT_BINARY_NAME, load_manifest
from pmshim.core.errors import ConfigError, LaunchError, LaunchErrorKind
from pmshim.core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS

INSTALL_HINT = "Please ensure the binary was installed correctly (run `pmshim install`)."

# Signals relayed to the child where the platform has them
FORWARDED_SIGNALS = ("SIGTERM", "SIGHUP")


def resolve_binary_path(manifest_path: Optional[Path] = None) -> Path:
    """Compute the installed binary path the same way the installer does.

    The manifest is only consulted for the binary name and install root; if
    it can't be read, the defaults are used.
    """
    binary_name = DEFAULT_BINARY_NAME
    install_root: Optional[Path] = None
    try:
        config = load_manifest(manifest_path)
    except ConfigError:
        pass
    else:
        binary_name = config.binary_name
        install_root = config.install_root

    return binary_path(install_root or get_pmshim_home(), binary_name)


def spawn(binary: Path, argv: Sequence[str]) -> subprocess.Popen:
    """Start ``binary`` with inherited standard streams.

    Raises:
        LaunchError: If the process could not be started.
    """
    try:
        return subprocess.Popen([str(binary), *argv])
    except FileNotFoundError as e:
        raise LaunchError(
            LaunchErrorKind.NOT_FOUND, binary, f"Binary not found: {binary}"
        ) from e
    except OSError as e:
        raise LaunchError(
            LaunchErrorKind.OTHER, binary, f"Error running binary: {e}"
        ) from e


@contextmanager
def _forward_signals(proc: subprocess.Popen) -> Iterator[None]:
    """Relay termination signals to ``proc`` while it runs.

    SIGINT is ignored in the parent: the terminal already delivers it to the
    child, which decides how to exit.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def forward(signum, _frame) -> None:
        try:
            proc.send_signal(signum)
        except ProcessLookupError:
            pass

    previous: Dict[int, object] = {}
    previous[signal.SIGINT] = signal.signal(signal.SIGINT, signal.SIG_IGN)
    for name in FORWARDED_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is not None:
            previous[signum] = signal.signal(signum, forward)

    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def wait_for_exit(proc: subprocess.Popen) -> int:
    """Wait for ``proc`` and return the exit status to report.

    A child killed by a signal has no exit code; that case reports 0.
    """
    with _forward_signals(proc):
        code = proc.wait()
    if code is None or code < 0:
        return EXIT_SUCCESS
    return code


def launch(argv: Optional[Sequence[str]] = None, binary: Optional[Path] = None) -> int:
    """Run the installed binary and return its exit code.

    Args:
        argv: Arguments for the binary. Defaults to ``sys.argv[1:]``.
        binary: Binary to run. Defaults to the installed binary path.

    Returns:
        The child's exit code, or 1 if it could not be started.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    binary = binary or resolve_binary_path()

    try:
        proc = spawn(binary, args)
    except LaunchError as e:
        print(str(e), file=sys.stderr)
        if e.kind == LaunchErrorKind.NOT_FOUND:
            print(INSTALL_HINT, file=sys.stderr)
        return EXIT_FAILURE

    return wait_for_exit(proc)


def run(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Launch the binary and exit with its status."""
    sys.exit(launch(argv))


def main() -> int:
    """Entry point for the ``pm`` console script."""
    try:
        return launch()
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
