"""Allow ``python -m service_reports``."""

import sys

from service_reports.cli.main import main

sys.exit(main())
