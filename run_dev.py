"""Run the Selectorsmith API in development mode."""

from api import create_app
import config

if __name__ == "__main__":
    app = create_app()
    print("Flask app created")

    print(f"\n{'='*50}")
    print(f"  Selectorsmith running at: http://{config.FLASK_HOST}:{config.FLASK_PORT}")
    print(f"  Try: curl http://{config.FLASK_HOST}:{config.FLASK_PORT}/api/health")
    print(f"{'='*50}\n")

    app.run(
        host=config.FLASK_HOST,
        port=config.FLASK_PORT,
        debug=True,
        use_reloader=True,
        threaded=True
    )
