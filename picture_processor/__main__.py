import sys

from picture_processor.cli.picture_processor import main

sys.exit(main())
