import sys

from vertexga.cli import main

sys.exit(main())
