import sys

from identifier_validator.main import main

sys.exit(main())
