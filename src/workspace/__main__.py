import sys

from .execution import main

sys.exit(main())
