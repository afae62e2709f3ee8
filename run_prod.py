#!/usr/bin/env python3
"""
F1 Stats API - Production Runner
Use this for production or production-like testing locally (Unix/Linux, Gunicorn)
"""

import os
import subprocess
import sys


def main():
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    port = os.getenv("PORT", "5000")
    workers = os.getenv("WORKERS", "2")

    print("🏎️  Starting F1 Stats API (Production Mode)")
    print("=" * 50)
    print(f"   Port: {port}")
    print(f"   Workers: {workers}")
    print("   Server: Gunicorn")
    print("=" * 50)

    cmd = [
        sys.executable, "-m", "gunicorn",
        "--bind", f"0.0.0.0:{port}",
        "--workers", workers,
        "--threads", "4",
        "--timeout", "60",
        "--access-logfile", "-",
        "--error-logfile", "-",
        "f1stats.app.wsgi:app"
    ]
    subprocess.run(cmd)


if __name__ == "__main__":
    main()
