"""Allow running as `python -m deploy_reporter`."""

import sys

from deploy_reporter.main import main

sys.exit(main())
