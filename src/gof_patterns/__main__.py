"""Allow ``python -m gof_patterns``."""
import sys

from gof_patterns.cli.main import main

sys.exit(main())
