"""Allow ``python -m deep_assert``."""

import sys

from deep_assert.cli import main

sys.exit(main())
