"""Allow ``python -m sphere``."""

from sphere.cli.main import main

raise SystemExit(main())
