"""Allow `python -m compfilter`."""

from .command import main

main()
