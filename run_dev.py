#!/usr/bin/env python3
"""
F1 Stats API - Development Runner
Quick script to start the development server
"""

from f1stats.app.api import configure_logging, create_app
from f1stats.services.scheduler import stop_scheduler
from f1stats.utils.config import config, print_config


def main():
    configure_logging(config.LOG_LEVEL)
    print_config()

    print("🏎️  Starting F1 Stats API...")
    print("=" * 50)

    app = create_app(config)
    try:
        # the reloader would start the podium scheduler twice
        app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG, use_reloader=False, threaded=True)
    except KeyboardInterrupt:
        print("Shutting down...")
    finally:
        stop_scheduler()


if __name__ == "__main__":
    main()
