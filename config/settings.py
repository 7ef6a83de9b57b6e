import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./db/tracker.db')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

# Storage key of the baseline used when no account is named explicitly
DEFAULT_ACCOUNT_KEY = os.getenv('DEFAULT_ACCOUNT_KEY', 'latestFollowersMpack')

# When true, an unreadable baseline is discarded and the check runs as a first run
RESET_CORRUPT_BASELINE = os.getenv('RESET_CORRUPT_BASELINE', 'false').lower() == 'true'
