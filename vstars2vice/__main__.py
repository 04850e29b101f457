import sys

from vstars2vice.cli import main

sys.exit(main())
