import sys

from lcparse.main import main

sys.exit(main())
