"""Starter .giturl.toml template."""

DEFAULT_TOML = """\
# giturl configuration
version = "1.0"

[convert]
target = "https"          # ssh | git | http | https | ftp | ftps | scp
with_suffix = true        # append .git to converted URLs
port_policy = "implicit"  # implicit | default | source
# user = "git"            # omit to keep the user from the parsed URL

[output]
format = "terminal"       # terminal | json
show_raw = true
"""
