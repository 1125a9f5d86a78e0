"""Constants for deploydoc."""

# Annotation marker: <!-- deploy-doc <kind> [params...] -->
MARKER_TOKEN = "deploy-doc"
REQUIRE_ENV_KIND = "require-env"

# Front matter
FRONT_MATTER_FENCE = "---"
ACTIVATION_KEY = "deployDoc"

CONFIG_FILE_NAME = "deploydoc.toml"

# Process exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CLEANUP_FAILED = 2
EXIT_MISSING_ENV = 3
EXIT_INVALID_DOCUMENT = 4
EXIT_PRE_INSTALL_FAILED = 5
