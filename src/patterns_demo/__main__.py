import sys

from patterns_demo.cli.main import main

sys.exit(main())
