import sys

from chance.cli import main

sys.exit(main())
