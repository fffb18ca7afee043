"""Allow ``python -m emojigate``."""

import sys

from emojigate.cli import main

sys.exit(main())
