import sys

from split_log.cli import main

sys.exit(main())
