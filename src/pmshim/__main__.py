"""Allow ``python -m pmshim`` to behave like the ``pm`` launcher."""

from pmshim.launcher import main

raise SystemExit(main())
