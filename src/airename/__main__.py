"""Entry point for running airename as a module.

This allows running: python -m airename
"""

from .cli import main

if __name__ == "__main__":
    main()
