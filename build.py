#!/usr/bin/env python3
from dateblog.cli import main

if __name__ == "__main__":
    main()
