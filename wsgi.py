"""WSGI entry point for the application."""
from dotenv import load_dotenv, find_dotenv

# Config classes read os.environ at import time, so load .env first
load_dotenv(find_dotenv())

import os
from adminui_api import create_app

application = create_app(os.getenv("FLASK_ENV", "development"))

app = application

if __name__ == "__main__":
    app.run()
