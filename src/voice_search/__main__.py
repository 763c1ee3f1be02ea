import sys

from voice_search.cli import main

sys.exit(main())
