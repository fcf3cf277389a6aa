"""Domain modules for cloud agent images."""
