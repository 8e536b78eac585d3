"""Infrastructure services shared across commitgate (config, logging, git, processes)."""
