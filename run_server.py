"""Run the Selectorsmith API with the Waitress production server."""

import os

# Ensure we're in the right directory
os.chdir(os.path.dirname(os.path.abspath(__file__)))

from waitress import serve

from api import create_app
import config

if __name__ == "__main__":
    print("=" * 50)
    print("  SELECTORSMITH SERVER")
    print("=" * 50)

    app = create_app()

    print(f"\n[*] Server starting on http://{config.FLASK_HOST}:{config.FLASK_PORT}")
    print("\n" + "=" * 50)

    serve(app, host=config.FLASK_HOST, port=config.FLASK_PORT, threads=4)
