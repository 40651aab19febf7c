"""Allow running as `python -m mangarn`."""

import sys

from mangarn.cli import main

sys.exit(main())
