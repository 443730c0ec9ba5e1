import sys

from iptv_manager.cli import main

sys.exit(main())
