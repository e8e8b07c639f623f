"""Allow ``python -m wikisearch_core``."""

import sys

from wikisearch_core.cli import main

sys.exit(main())
