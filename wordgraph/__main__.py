import sys

from wordgraph.cli import main

sys.exit(main())
