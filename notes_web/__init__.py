"""Server-rendered notes workbench built on FastAPI and Jinja2."""
