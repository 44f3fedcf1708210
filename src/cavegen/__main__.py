"""Allow ``python -m cavegen``."""

from .cli import main

raise SystemExit(main())
