import sys

from memo2txt.main import main

sys.exit(main())
