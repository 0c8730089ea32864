# jsonrift/version.py
# Package version constant. Single authoritative definition.
# Referenced by the CLI --version flag. Keep in step with pyproject.toml.

__version__: str = "1.0.0"
