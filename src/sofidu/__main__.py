from __future__ import annotations

import sys

from sofidu.main import main

sys.exit(main())
