import sys

from filezipper.cli import main

sys.exit(main())
