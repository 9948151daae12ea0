import sys

from shift_scheduler.main import main

sys.exit(main())
