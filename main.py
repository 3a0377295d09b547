"""
Entry point for the date round-trip reproduction
"""

import sys
import os
import asyncio
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from date_roundtrip.runner import run

# Configure logging
logging.basicConfig(level=logging.WARNING)

if __name__ == "__main__":
    sys.exit(asyncio.run(run()))
