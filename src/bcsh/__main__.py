import sys

from bcsh.shell import main

sys.exit(main())
