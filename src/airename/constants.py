"""Application-level constants for airename.

This module keeps only cross-cutting app/file/path constants.
"""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "airename"

# ============================================================================
# Configuration
# ============================================================================

# Environment variable that points at the config file
CONFIG_PATH_ENV_VAR = "AIRENAME_CONFIG"

# User data directory (created in home directory)
USER_DATA_DIR = f"~/.{APP_NAME}"
DEFAULT_CONFIG_PATH = f"{USER_DATA_DIR}/config.json"

# Config file section holding the rename settings
CONFIG_SECTION = "ai_rename"

# ============================================================================
# Name limits (Unicode code points)
# ============================================================================

FILE_NAME_MAX_LENGTH = 50
FOLDER_NAME_MAX_LENGTH = 30
