import sys

from .ui.cli.demo import main

sys.exit(main())
