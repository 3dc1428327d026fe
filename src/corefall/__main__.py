import sys

from corefall.cli import main

sys.exit(main())
