"""Development server entrypoint.

Run with:
  python -m authportal
"""

from authportal.app import create_app
from authportal.shared.config import load_config


def main() -> None:
    config = load_config()
    app = create_app()
    app.run(host=config.host, port=config.port, debug=config.debug_logging, threaded=True)


if __name__ == "__main__":
    main()
