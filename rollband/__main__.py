"""Allow running as: python -m rollband"""

import sys

from rollband.cli import main

sys.exit(main())
