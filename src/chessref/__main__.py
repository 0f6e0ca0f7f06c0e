import sys

from chessref.app import main

sys.exit(main())
