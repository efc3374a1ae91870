import sys

from linecli.cli.main import main

sys.exit(main())
