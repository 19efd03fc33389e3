import sys

from asciiramp.cli import main

sys.exit(main())
