import os

bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8080")
wsgi_app = "symbol_quest.app:create_app()"
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "sync"
timeout = 60
keepalive = 5
max_requests = 1000
max_requests_jitter = 50

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stderr
loglevel = os.getenv("LOG_LEVEL", "info")

# For development with reload
reload = os.getenv("FLASK_ENV") == "development"
