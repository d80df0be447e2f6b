#!/usr/bin/env python3

import sys

from exchange_currency.cli.interface import main

if __name__ == "__main__":
    sys.exit(main())
