import sys

from recipecorpus.cli import main

sys.exit(main())
