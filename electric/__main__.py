import sys

from electric.cli import main

sys.exit(main())
