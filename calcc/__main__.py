import sys

from calcc.main import main

sys.exit(main())
