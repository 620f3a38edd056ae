import sys

from jointcount.app import main

sys.exit(main())
