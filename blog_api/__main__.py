"""Run the development server, creating tables first."""

import os

from .factory import create_web_app
from . import storage


def main() -> None:
    """Create the database tables and serve the app."""
    app = create_web_app()
    with app.app_context():
        storage.create_all()
    app.run(host=os.environ.get('HOST', '127.0.0.1'),
            port=int(os.environ.get('PORT', '8000')))


if __name__ == '__main__':
    main()
