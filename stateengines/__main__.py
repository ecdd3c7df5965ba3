#!/usr/bin/env python3
"""Entry point for ``python -m stateengines``."""

import sys

from stateengines.cli import main

sys.exit(main())
