import sys

from simple_meditation.main import main

sys.exit(main())
