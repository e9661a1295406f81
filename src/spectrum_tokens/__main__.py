"""Allow running the compiler with python -m spectrum_tokens."""

import sys

from spectrum_tokens.cli import main

sys.exit(main())
