"""Domain services: scorers, writers and batch jobs."""
