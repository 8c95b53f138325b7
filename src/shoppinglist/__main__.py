"""
Run with: python -m shoppinglist
"""
import sys

from shoppinglist.main import main

if __name__ == "__main__":
    sys.exit(main())
