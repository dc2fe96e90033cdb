import os

# Bind & workers
bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
wsgi_app = "bloggy:create_app()"
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
threads = 1
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = None  # the app writes its own JSON access log
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
