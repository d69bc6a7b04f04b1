"""
Entry point for the IELTS Reading Locator.

Run with:
    python main.py play
    python main.py sample
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from src.cli.locator_cli import main

if __name__ == "__main__":
    main()
