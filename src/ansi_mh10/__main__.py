"""
ANSI MH10.8.2 Parser - CLI Entry Point

Usage:
    python -m src.ansi_mh10 parse "D050203<GS>9N12345"
    python -m src.ansi_mh10 describe 9N
"""

from src.ansi_mh10.cli import app

if __name__ == "__main__":
    app()
