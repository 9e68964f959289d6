"""
Sitefolio API entry point
=========================

Run with:
    python app.py

Or in production (Render):
    gunicorn app:app
"""

from sitefolio import create_app
from sitefolio.core.config import Config

app = create_app(Config)


if __name__ == '__main__':
    print(f"Server running on port {Config.PORT}")
    app.run(host='0.0.0.0', port=Config.PORT, debug=False)
