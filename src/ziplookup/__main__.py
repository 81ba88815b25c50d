import sys

from .cli.lookup import main

sys.exit(main())
