"""
Configuration settings for the date round-trip reproduction
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Environment configuration
DATABASE_URL = os.getenv("DATABASE_URL", "")
TABLE_NAME = os.getenv("TABLE_NAME", "TestData")
CONNECT_TIMEOUT = float(os.getenv("CONNECT_TIMEOUT", 10))
COMMAND_TIMEOUT = float(os.getenv("COMMAND_TIMEOUT", 30))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
