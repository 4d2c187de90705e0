"""Starter .gitgrove.toml template."""

CONFIG_FILENAME = ".gitgrove.toml"

DEFAULT_TOML = """\
# gitgrove configuration
version = "1.0"

[git]
timeout = 30              # seconds per git command
context_lines = 3         # -U<n> for every diff
find_renames = true       # -M rename detection

[log]
limit = 50                # commits shown by `gitgrove log`

[output]
format = "terminal"       # terminal | json | yaml
show_stats = true

[logging]
level = "WARNING"         # DEBUG | INFO | WARNING | ERROR | CRITICAL
format = "console"        # console | json
"""
