"""
atomic-shadcn - Entry point for CLI execution.

Allows running the package as a module: python -m atomic_shadcn
"""

from atomic_shadcn.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
