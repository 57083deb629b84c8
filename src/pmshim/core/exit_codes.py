"""Exit codes for pmshim entry points.

- 0: Success (binary installed, or the launched binary reported success)
- 1: Configuration, download, filesystem or launch failure

The ``pm`` launcher otherwise exits with the child's own exit code.
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
