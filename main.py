"""
Main entrypoint for the campgrounds website.

Usage:
    Run directly (`python main.py`). Configure with DB_URL, SESSION_SECRET,
    HOST and PORT environment variables.
"""
import os

import uvicorn

from src.db.database import create_tables


def main():
    """
    Main function to prepare the database and serve the site.
    """
    try:
        # Initialize database tables
        create_tables()

        host = os.getenv("HOST", "0.0.0.0")
        port = int(os.getenv("PORT", "8000"))
        print(f"Serving campgrounds on http://{host}:{port}")
        uvicorn.run("src.api.app:app", host=host, port=port)

        return 0
    except Exception as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
