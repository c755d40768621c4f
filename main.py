"""
JobNest - Server Entry Point.

Usage:
    python main.py              # serve the API on 0.0.0.0:8000
    python main.py --port 9000  # serve on another port
    python main.py init-db      # create tables without serving
"""

import sys

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from jobnest.db.base import init_db


def main():
    """Run the JobNest API server or a maintenance command."""
    args = sys.argv[1:]

    if args and args[0] == "init-db":
        try:
            init_db()
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        print("Tables created: users, jobs, applications, saved_jobs, messages")
        return

    port = 8000
    if "--port" in args:
        try:
            port = int(args[args.index("--port") + 1])
        except (IndexError, ValueError):
            print("Error: --port expects a number")
            sys.exit(1)

    print("JobNest API")
    print("=" * 40)
    uvicorn.run("jobnest.api.app:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
