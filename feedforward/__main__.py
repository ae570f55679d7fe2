import sys

from feedforward.demo import main

sys.exit(main())
