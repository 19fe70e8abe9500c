import sys

from bigcalc.cli import main

sys.exit(main())
