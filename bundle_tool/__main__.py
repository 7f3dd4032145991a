"""Allow running as ``python -m bundle_tool``"""

from .cli.main import main

if __name__ == "__main__":
    main()
