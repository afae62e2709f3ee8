"""
WSGI Entry Point for Production
Use with Gunicorn: gunicorn -w 2 --threads 4 -b 0.0.0.0:5000 f1stats.app.wsgi:app
"""

from f1stats.app.api import configure_logging, create_app
from f1stats.utils.config import config, print_config

configure_logging(config.LOG_LEVEL)
print_config()

app = create_app(config)

if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT)
