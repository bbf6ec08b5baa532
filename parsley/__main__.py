import sys

from parsley.cli import main

sys.exit(main())
