import sys

from twitchlink.main import main

sys.exit(main())
