import os

from tears import create_app

app = create_app()

if __name__ == "__main__":
    # Get host and port from environment variables for flexibility
    host = os.environ.get('HOST', '127.0.0.1')
    port = int(os.environ.get('PORT', 5000))

    app.run(
        host=host,
        port=port,
        debug=app.config.get("DEBUG", False)
    )
