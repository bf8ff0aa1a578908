"""Entry point for ``python -m simplecheck``."""
import sys

from simplecheck.cli import main

sys.exit(main())
