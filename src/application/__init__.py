"""Application services: run configuration, map generation driver, CLI."""
