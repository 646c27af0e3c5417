"""Allow ``python -m json_tree_compare``."""

import sys

from json_tree_compare.cli import main

sys.exit(main())
