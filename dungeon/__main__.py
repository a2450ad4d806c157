import sys

from dungeon.main import main

sys.exit(main())
