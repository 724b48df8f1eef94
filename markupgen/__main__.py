import sys

from markupgen.cli import main

sys.exit(main())
