"""Entry point for ``python -m verlex``."""

from verlex.cli import main

raise SystemExit(main())
