import sys

from raytrace.main import main

sys.exit(main())
