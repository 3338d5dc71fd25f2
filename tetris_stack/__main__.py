import sys

from tetris_stack.cli import main

sys.exit(main())
