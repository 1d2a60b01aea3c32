import sys
from license_finder.cli import main

sys.exit(main())
