"""Configuration for the GridCab application."""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

# Directory holding passengers.json and drivers.json
DATA_DIR = os.getenv("GRIDCAB_DATA_DIR", "data")

LOG_LEVEL = os.getenv("GRIDCAB_LOG_LEVEL", "INFO").upper()

# Set up logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
