"""Allow ``python -m pmshim.cli``."""

from pmshim.cli import main

raise SystemExit(main())
