"""Allows `python -m src.cli`"""

import sys

from src.cli.console import main

sys.exit(main())
