"""Report renderers — terminal, JSON, YAML."""
