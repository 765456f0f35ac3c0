import sys

from greenforge.cli import main

sys.exit(main())
