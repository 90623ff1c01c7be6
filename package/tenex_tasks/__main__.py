"""Allow `python -m tenex_tasks`."""

import sys

from .cli import main

sys.exit(main())
