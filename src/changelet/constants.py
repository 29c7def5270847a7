"""Constants for changelet."""

# Change directory layout
CHANGES_DIR = ".changes"
CONFIG_FILE = "config.toml"
DEFAULT_PATTERN = "*.md"

# Front matter delimiter line (opens and closes the metadata block)
FRONT_MATTER_DELIMITER = "---"

# Priority bounds (inclusive)
PRIORITY_MIN = 0
PRIORITY_MAX = 10

# Exit codes
EXIT_INVALID = 1
