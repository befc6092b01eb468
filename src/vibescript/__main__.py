import sys

from vibescript.cli import main

sys.exit(main())
