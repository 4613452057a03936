import sys

from translitqa.applications.cli import main

sys.exit(main())
