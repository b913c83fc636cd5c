import sys

from etls.cli import main

sys.exit(main())
