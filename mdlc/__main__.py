import sys

from mdlc.cli import main

sys.exit(main())
