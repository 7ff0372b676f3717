"""
Convenience entry point for running openhours directly.

Usage: python -m openhours [command] [options]
"""

from openhours.cli.app import app

if __name__ == "__main__":
    app()
