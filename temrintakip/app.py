#!/usr/bin/env python3
"""
TemrinTakip - Student Exercise Tracker
======================================
Run: python3 -m temrintakip.app
Then open: http://localhost:3000
"""
import logging

from flask import Flask
from flask_cors import CORS

from temrintakip.config import HOST, PORT, DEBUG, SECRET_KEY
from temrintakip.routes import register_routes


def create_app(test_config: dict = None) -> Flask:
    """Build the Flask app with all blueprints registered."""
    app = Flask(__name__, static_folder='static', static_url_path='/static')
    app.config['SECRET_KEY'] = SECRET_KEY
    app.json.ensure_ascii = False
    if test_config:
        app.config.update(test_config)

    CORS(app)
    register_routes(app)
    return app


app = create_app()


def main():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"TemrinTakip running on http://localhost:{PORT}")
    app.run(host=HOST, port=PORT, debug=DEBUG, threaded=True)


if __name__ == '__main__':
    main()
