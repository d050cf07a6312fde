"""Gunicorn config for the pricing API."""
import os

wsgi_app = "pricing.main:app"

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn workers; each parses its own copy of the dataset at startup
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Excel exports are the slowest requests
timeout = 60

graceful_timeout = 30

# Must exceed the proxy keep-alive
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
