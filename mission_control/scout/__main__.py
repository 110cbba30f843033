import sys

from mission_control.scout.cli import main

sys.exit(main())
