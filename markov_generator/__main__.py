import sys

from markov_generator.cli import main

sys.exit(main())
