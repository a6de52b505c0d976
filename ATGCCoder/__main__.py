import sys

from ATGCCoder.cli import main

sys.exit(main())
