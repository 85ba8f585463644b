# config.py
"""
Central settings for the memo exporter. Everything here can be overridden
from the environment or from a .env file next to where the tool is run.

Nothing is logged from here: logging isn't set up yet at import time, so
problems with the settings are collected in CONFIG_WARNINGS and main.py
reports them once it has configured logging.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file (if one exists)
load_dotenv()

CONFIG_WARNINGS = []

# --- File Locations ---
# The exported notes archive we read from and the text file we write to.

INPUT_FILE = os.getenv("MEMO_INPUT_FILE", "memos.html")
OUTPUT_FILE = os.getenv("MEMO_OUTPUT_FILE", "output.txt")
ENCODING = os.getenv("MEMO_ENCODING", "utf-8") or "utf-8"

# --- Ordering ---
# What to do with memos whose timestamp can't be parsed:
#   "oldest"  -> treat as the earliest possible time (the original behavior)
#   "last"    -> keep them, but after every dated memo
#   "exclude" -> leave them out of the output
UNPARSED_POLICIES = ("oldest", "last", "exclude")

UNPARSED_POLICY = os.getenv("MEMO_UNPARSED_POLICY", "oldest").strip().lower()
if UNPARSED_POLICY not in UNPARSED_POLICIES:
    CONFIG_WARNINGS.append(f"Unknown MEMO_UNPARSED_POLICY '{UNPARSED_POLICY}', falling back to 'oldest'.")
    UNPARSED_POLICY = "oldest"

# --- Logging ---
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in LOG_LEVELS:
    CONFIG_WARNINGS.append(f"Unknown LOG_LEVEL '{LOG_LEVEL}', falling back to 'INFO'.")
    LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
