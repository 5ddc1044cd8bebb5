"""Platform adapters: logging and account lookup."""
