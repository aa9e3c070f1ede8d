import sys

from notefd.cli import main

sys.exit(main())
