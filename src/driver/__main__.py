import sys

from src.driver.cli import main

sys.exit(main())
