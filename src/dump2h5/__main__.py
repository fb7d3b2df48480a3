import sys

from dump2h5.cli import main

sys.exit(main())
