# foodquick/__main__.py
import sys
from foodquick.main import main

sys.exit(main())
