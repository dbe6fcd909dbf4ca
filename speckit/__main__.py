"""Entry point for running speckit as a module.

This allows running the application with:
    python -m speckit [COMMAND] [OPTIONS]
"""

from speckit.cli import app

if __name__ == "__main__":
    app()
