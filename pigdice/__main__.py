import sys

from pigdice.cli import main

sys.exit(main())
