#!/usr/bin/env python3

from ImageLookup.run import main

if __name__ == "__main__":
    raise SystemExit(main())
