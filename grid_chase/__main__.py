import sys

from grid_chase.main import main

sys.exit(main())
