"""Constants for devbranch CLI."""

# Subprocess timeouts (seconds)
GIT_TIMEOUT = 30
GIT_NETWORK_TIMEOUT = 120  # pull talks to the remote

CONFIG_FILENAME = ".devbranch.toml"
