"""
Allow running the CLI as ``python -m loggit_cli``
"""

from loggit_cli.main import main

if __name__ == "__main__":
    main()
