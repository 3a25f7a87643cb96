import sys

from sophone.cli import main

sys.exit(main())
